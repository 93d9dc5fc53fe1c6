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

"""Undirected edges over vertex ids and collapsing of reciprocal records."""

from dataclasses import dataclass
from typing import Iterable, Tuple


@dataclass(frozen=True)
class Edge:
    start: int
    end: int
    weight: int

    def key(self) -> Tuple[int, int, int]:
        # same key for both orientations
        lo, hi = sorted((self.start, self.end))
        return (lo, hi, self.weight)


def dedupe_edges(edges: Iterable[Edge]) -> Tuple[Edge, ...]:
    """One Edge per undirected edge.

    Every undirected edge shows up twice in an adjacency list, once from each
    endpoint. The orientation seen first wins; a record whose reverse (or
    itself) was already kept is dropped. Records between the same endpoints
    with different weights are distinct edges and all survive.
    """
    seen = set()
    result = []
    for edge in edges:
        key = edge.key()
        if key in seen:
            continue
        seen.add(key)
        result.append(edge)
    return tuple(result)
