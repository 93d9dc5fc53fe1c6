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

"""Everything one MST computation needs, built from parsed adjacency input."""

from dataclasses import dataclass, field
from spantree.adjacency import AdjacencyLine, AdjacencyRecord
from spantree.disjoint_set import DisjointSet
from spantree.edge import Edge, dedupe_edges
from spantree.kruskal import MstResult, kruskal
from spantree.vertex_index import VertexIndex
from typing import Iterable, Tuple


NamedEdge = Tuple[str, str, int]


@dataclass(frozen=True)
class Graph:
    vertices: VertexIndex = field(default_factory=VertexIndex)
    edges: Tuple[Edge, ...] = ()

    @classmethod
    def from_records(
        cls, records: Iterable[AdjacencyRecord], vertices: Iterable[str] = ()
    ) -> "Graph":
        """Ids follow first-seen order: declared vertices, then each record's
        vertex and neighbor as they come."""
        index = VertexIndex()
        for name in vertices:
            index.get_or_assign(name)
        edges = []
        for vertex, neighbor, weight in records:
            start = index.get_or_assign(vertex)
            end = index.get_or_assign(neighbor)
            edges.append(Edge(start, end, weight))
        return cls(index, dedupe_edges(edges))

    @classmethod
    def from_lines(cls, lines: Iterable[AdjacencyLine]) -> "Graph":
        index = VertexIndex()
        edges = []
        for line in lines:
            start = index.get_or_assign(line.vertex)
            for neighbor, weight in line.neighbors:
                edges.append(Edge(start, index.get_or_assign(neighbor), weight))
        return cls(index, dedupe_edges(edges))

    @property
    def vertex_count(self) -> int:
        return self.vertices.size()

    def named(self, edge: Edge) -> NamedEdge:
        return (
            self.vertices.name(edge.start),
            self.vertices.name(edge.end),
            edge.weight,
        )

    def named_edges(self, result: MstResult) -> Tuple[NamedEdge, ...]:
        return tuple(self.named(e) for e in result.edges)

    def minimum_spanning_tree(
        self, path_compression: bool = False, union_by_rank: bool = False
    ) -> MstResult:
        disjoint_set = DisjointSet(
            self.vertex_count,
            path_compression=path_compression,
            union_by_rank=union_by_rank,
        )
        return kruskal(self.edges, self.vertex_count, disjoint_set)
