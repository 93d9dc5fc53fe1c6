# Copyright 2021 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Kruskal's minimum spanning tree over a DisjointSet.

Edges are taken cheapest first; ties keep input order. An edge is accepted
when its endpoints have different representatives, after which the two sets
are merged. The loop stops once n - 1 edges are accepted.
"""

from absl import logging
from spantree.disjoint_set import DisjointSet
from spantree.edge import Edge
from typing import Iterable, NamedTuple, Optional, Tuple


class DisconnectedGraphError(ValueError):
    def __init__(self, accepted: int, required: int):
        super().__init__(
            f"Graph is not connected, MST incomplete: ran out of edges after "
            f"accepting {accepted} of {required}"
        )
        self.accepted = accepted
        self.required = required


class MstResult(NamedTuple):
    edges: Tuple[Edge, ...] = ()
    total_weight: int = 0


def kruskal(
    edges: Iterable[Edge],
    vertex_count: int,
    disjoint_set: Optional[DisjointSet] = None,
) -> MstResult:
    if vertex_count < 0:
        raise ValueError(f"Vertex count must be zero or positive, got {vertex_count}")
    required = max(vertex_count - 1, 0)
    if required == 0:
        return MstResult()

    if disjoint_set is None:
        disjoint_set = DisjointSet(vertex_count)
    elif len(disjoint_set) != vertex_count:
        raise ValueError(
            f"DisjointSet has {len(disjoint_set)} elements, expected {vertex_count}"
        )

    edges = tuple(edges)
    for edge in edges:
        if edge.weight < 0:
            raise ValueError(f"Negative weight not supported: {edge}")

    accepted = []
    total_weight = 0
    # sorted is stable so equal weights keep their input order
    for edge in sorted(edges, key=lambda e: e.weight):
        start_root = disjoint_set.find(edge.start)
        end_root = disjoint_set.find(edge.end)
        if start_root == end_root:
            logging.debug(f"Reject {edge}, would form a cycle")
            continue
        disjoint_set.union(start_root, end_root)
        accepted.append(edge)
        total_weight += edge.weight
        logging.debug(f"Accept {edge} ({len(accepted)}/{required})")
        if len(accepted) == required:
            return MstResult(tuple(accepted), total_weight)

    raise DisconnectedGraphError(len(accepted), required)
