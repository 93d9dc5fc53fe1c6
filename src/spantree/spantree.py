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

"""Print the minimum spanning tree of a city distance graph.

Input is an adjacency list, one city per line, followed by neighbor and
distance pairs:

Dallas,Austin,195,Houston,239
Austin,Dallas,195,Houston,162
Houston,Dallas,239,Austin,162

Sample usage:
spantree cities.csv
spantree --output_file=mst.txt --path_compression my_config.toml
"""
from absl import app
from absl import logging
from spantree import adjacency, config, report
from spantree.config import MstConfig
from spantree.graph import Graph
from spantree.kruskal import MstResult
from spantree.util import file_printer
from pathlib import Path
from typing import Optional, Sequence, Tuple


def _split_args(argv: Sequence[str]) -> Tuple[Optional[Path], Optional[Path]]:
    config_files = [Path(a) for a in argv if a.endswith(".toml")]
    input_files = [Path(a) for a in argv if not a.endswith(".toml")]
    if len(config_files) > 1:
        raise app.UsageError(f"At most one config file, got {config_files}")
    if len(input_files) > 1:
        raise app.UsageError(f"At most one adjacency list, got {input_files}")
    config_file = config_files[0] if config_files else None
    input_file = input_files[0] if input_files else None
    return config_file, input_file


def compute(mst_config: MstConfig) -> Tuple[Graph, MstResult]:
    lines = adjacency.parse_csv(mst_config.input_file, mst_config.delimiter)
    graph = Graph.from_lines(lines)
    logging.info(
        f"Loaded {graph.vertex_count} vertices, {len(graph.edges)} edges"
        f" from {mst_config.input_file}"
    )
    result = graph.minimum_spanning_tree(
        path_compression=mst_config.path_compression,
        union_by_rank=mst_config.union_by_rank,
    )
    logging.info(
        f"MST has {len(result.edges)} edges, total weight {result.total_weight}"
    )
    return graph, result


def _run(argv):
    config_file, input_file = _split_args(argv[1:])
    mst_config = config.load(config_file, input_file)
    if mst_config.input_file is None:
        raise app.UsageError(
            "Must specify an adjacency list, positionally or via --input_file"
        )

    graph, result = compute(mst_config)
    with file_printer(mst_config.output_file) as print:
        report.write(print, graph.named_edges(result), result.total_weight)
    if mst_config.output_file != "-":
        logging.info(f"Wrote {mst_config.output_file}")


def main():
    # We don't seem to be __main__ when run as cli tool installed by setuptools
    app.run(_run)


if __name__ == "__main__":
    app.run(_run)
