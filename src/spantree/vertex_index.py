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

"""Dense integer ids for named vertices."""

from typing import Dict, List, Tuple


class VertexIndex:
    """Bidirectional name <=> id mapping.

    Ids are handed out in first-seen order starting at 0, so they are only
    stable for the build that assigned them.
    """

    def __init__(self):
        self._ids: Dict[str, int] = {}
        self._names: List[str] = []

    def get_or_assign(self, name: str) -> int:
        vertex_id = self._ids.get(name)
        if vertex_id is None:
            vertex_id = len(self._names)
            self._ids[name] = vertex_id
            self._names.append(name)
        return vertex_id

    def id(self, name: str) -> int:
        return self._ids[name]

    def name(self, vertex_id: int) -> str:
        if not 0 <= vertex_id < len(self._names):
            raise IndexError(f"No vertex with id {vertex_id}")
        return self._names[vertex_id]

    def names(self) -> Tuple[str, ...]:
        return tuple(self._names)

    def size(self) -> int:
        return len(self._names)

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, name) -> bool:
        return name in self._ids

