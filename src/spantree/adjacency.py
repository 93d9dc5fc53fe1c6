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

"""Reads adjacency lists. Each row looks like:

Dallas,Austin,195,Houston,239

The first column names a vertex, followed by zero or more neighbor, distance
pairs. Distances are non-negative integers. A row holding only a name declares
a vertex with no edges.
"""

import csv
from dataclasses import dataclass
from typing import Iterator, NamedTuple, Tuple


class AdjacencyParseError(ValueError):
    pass


class AdjacencyRecord(NamedTuple):
    vertex: str
    neighbor: str
    weight: int


@dataclass(frozen=True)
class AdjacencyLine:
    vertex: str
    neighbors: Tuple[Tuple[str, int], ...] = ()

    def records(self) -> Iterator[AdjacencyRecord]:
        for neighbor, weight in self.neighbors:
            yield AdjacencyRecord(self.vertex, neighbor, weight)


def _parse_weight(value: str, where: str) -> int:
    # int() alone would take "1_000" or non-ASCII digits
    digits = value[1:] if value[:1] in ("+", "-") else value
    if not (digits.isascii() and digits.isdigit()):
        raise AdjacencyParseError(f"{where}: weight {value!r} is not an integer")
    weight = int(value)
    if weight < 0:
        raise AdjacencyParseError(f"{where}: weight {weight} is negative")
    return weight


def _parse_row(row, where: str) -> AdjacencyLine:
    vertex, *rest = (field.strip() for field in row)
    if not vertex:
        raise AdjacencyParseError(f"{where}: missing vertex name")
    # tolerate a trailing delimiter
    if len(rest) % 2 == 1 and rest[-1] == "":
        rest = rest[:-1]
    if len(rest) % 2 != 0:
        raise AdjacencyParseError(
            f"{where}: expected neighbor, weight pairs after {vertex!r}, got {rest}"
        )
    neighbors = []
    for neighbor, weight in zip(rest[::2], rest[1::2]):
        if not neighbor:
            raise AdjacencyParseError(f"{where}: missing neighbor name")
        neighbors.append((neighbor, _parse_weight(weight, where)))
    return AdjacencyLine(vertex, tuple(neighbors))


def load_from(file, delimiter: str = ",") -> Tuple[AdjacencyLine, ...]:
    results = []
    reader = csv.reader(file, delimiter=delimiter)
    for row in reader:
        if not any(field.strip() for field in row):
            continue
        results.append(_parse_row(row, f"line {reader.line_num}"))
    return tuple(results)


def parse_csv(filename, delimiter: str = ",") -> Tuple[AdjacencyLine, ...]:
    with open(filename, newline="") as f:
        try:
            return load_from(f, delimiter)
        except AdjacencyParseError as e:
            raise AdjacencyParseError(f"{filename}, {e}") from e
