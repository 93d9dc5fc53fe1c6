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

from absl import flags
import importlib.resources as resources
from pathlib import Path
import toml
from typing import Any, MutableMapping, NamedTuple, Optional, Tuple

from spantree import util


FLAGS = flags.FLAGS


_DEFAULT_CONFIG_FILE = "_default.toml"


# we use None as a sentinel for flag not set; MstConfig class has the actual defaults.
# CLI flags override config file (which overrides default MstConfig).
flags.DEFINE_string("input_file", None, "Adjacency list to read.")
flags.DEFINE_string("output_file", None, "Output filename ('-' means stdout).")
flags.DEFINE_string("delimiter", None, "Field delimiter of the adjacency list.")
flags.DEFINE_bool(
    "path_compression", None, "Whether union-find compresses paths on find."
)
flags.DEFINE_bool(
    "union_by_rank", None, "Whether union-find attaches the shallower tree."
)


class MstConfig(NamedTuple):
    input_file: Optional[Path] = None
    output_file: str = "-"
    delimiter: str = ","
    path_compression: bool = False
    union_by_rank: bool = False

    def validate(self):
        if len(self.delimiter) != 1:
            raise ValueError(
                f"'delimiter' must be a single character, got {self.delimiter!r}"
            )
        if not self.output_file:
            raise ValueError("'output_file' must not be empty")
        for attr_name in ("path_compression", "union_by_rank"):
            value = getattr(self, attr_name)
            if not isinstance(value, bool):
                raise ValueError(
                    f"'{attr_name}' must be true or false, got {value!r}"
                )
        return self


def write(dest: Path, config: MstConfig):
    toml_cfg = {
        "output_file": config.output_file,
        "delimiter": config.delimiter,
        "path_compression": config.path_compression,
        "union_by_rank": config.union_by_rank,
    }
    if config.input_file is not None:
        toml_cfg["input_file"] = str(config.input_file)
    dest.write_text(toml.dumps(toml_cfg))


def _resolve_config(
    config_file: Optional[Path] = None,
) -> Tuple[Optional[Path], MutableMapping[str, Any]]:
    if config_file is None:
        default = resources.files("spantree.data").joinpath(_DEFAULT_CONFIG_FILE)
        # no config_dir in this context; bad input if we need it
        return None, toml.loads(default.read_text())
    return config_file.parent, toml.load(config_file)


_DEFAULT_CONFIG = MstConfig()


def _pop_flag(config: MutableMapping[str, Any], name: str) -> Any:
    config_value = config.pop(name, None)
    flag_value = getattr(FLAGS, name)
    if config_value is None and flag_value is None:
        return getattr(_DEFAULT_CONFIG, name)
    return flag_value if flag_value is not None else config_value


def _resolve_input(relative_base: Optional[Path], config: MutableMapping[str, Any]):
    if FLAGS.input_file is not None:
        config.pop("input_file", None)
        return util.abspath(Path(FLAGS.input_file))
    input_file = config.pop("input_file", None)
    if input_file is None:
        return None
    input_path = Path(input_file)
    if input_path.is_absolute():
        return input_path
    if relative_base is None:
        raise ValueError(f"No relative_base, unable to resolve {input_path}")
    return util.abspath(relative_base / input_path)


def load(
    config_file: Optional[Path] = None, input_file: Optional[Path] = None
) -> MstConfig:
    config_dir, config = _resolve_config(config_file)

    # CLI flags will take precedence over the config file
    resolved_input = _resolve_input(config_dir, config)
    if input_file is not None:
        resolved_input = util.abspath(input_file)
    output_file = _pop_flag(config, "output_file")
    delimiter = _pop_flag(config, "delimiter")
    path_compression = _pop_flag(config, "path_compression")
    union_by_rank = _pop_flag(config, "union_by_rank")

    if config:
        raise ValueError(f"Unexpected config: {config}")

    return MstConfig(
        input_file=resolved_input,
        output_file=output_file,
        delimiter=delimiter,
        path_compression=path_compression,
        union_by_rank=union_by_rank,
    ).validate()
