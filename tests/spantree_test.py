# Copyright 2020 Google LLC
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

from absl import app
from absl.testing import flagsaver
from spantree import spantree
from spantree.adjacency import AdjacencyParseError
from spantree.kruskal import DisconnectedGraphError
import pytest
from test_helper import locate_test_file


_CITIES_MST = (
    "Austin -> San Antonio 80\n"
    "Dallas -> Waco 95\n"
    "Austin -> Waco 102\n"
    "Austin -> Houston 162\n"
    "Total Distance: 439\n"
)


def test_prints_mst(capsys):
    spantree._run(["spantree", str(locate_test_file("cities.csv"))])
    assert capsys.readouterr().out == _CITIES_MST


def test_config_file(capsys):
    spantree._run(["spantree", str(locate_test_file("cities.toml"))])
    assert capsys.readouterr().out == _CITIES_MST


def test_output_file(tmp_path):
    output_file = tmp_path / "mst.txt"
    with flagsaver.flagsaver(output_file=str(output_file)):
        spantree._run(["spantree", str(locate_test_file("cities.csv"))])
    assert output_file.read_text() == _CITIES_MST


def test_disconnected():
    with pytest.raises(DisconnectedGraphError):
        spantree._run(["spantree", str(locate_test_file("disconnected.csv"))])


def test_parse_error(tmp_path):
    bad = tmp_path / "bad.csv"
    bad.write_text("A,B,far\n")
    with pytest.raises(AdjacencyParseError):
        spantree._run(["spantree", str(bad)])


@pytest.mark.parametrize(
    "argv",
    [
        ["spantree"],
        ["spantree", "a.csv", "b.csv"],
        ["spantree", "a.toml", "b.toml"],
    ],
)
def test_usage_errors(argv):
    with pytest.raises(app.UsageError):
        spantree._run(argv)
