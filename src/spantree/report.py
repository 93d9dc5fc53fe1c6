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

"""Renders an MST the way the command line prints it:

Austin -> Dallas 195
Dallas -> Houston 239
Total Distance: 434
"""

from spantree.graph import NamedEdge
from typing import Callable, Iterable, Iterator


def edge_line(edge: NamedEdge) -> str:
    start, end, weight = edge
    return f"{start} -> {end} {weight}"


def mst_lines(edges: Iterable[NamedEdge], total_weight: int) -> Iterator[str]:
    for edge in edges:
        yield edge_line(edge)
    yield f"Total Distance: {total_weight}"


def write(
    print_fn: Callable[[str], None], edges: Iterable[NamedEdge], total_weight: int
):
    for line in mst_lines(edges, total_weight):
        print_fn(line)
