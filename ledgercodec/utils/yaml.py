# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Loading of yaml settings files.

A file may name another file under the reserved `extends` key, the named file is loaded first and the values of the
extending file are merged over it:

>>> merge_dicts({'a': 1, 'b': {'c': 2, 'd': 3}}, {'b': {'d': 5}, 'e': 6})
{'a': 1, 'b': {'c': 2, 'd': 5}, 'e': 6}
"""

from pathlib import Path
from typing import Any, Optional, TypeVar, Union

import yaml
from pydantic import BaseModel

EXTENDS_KEY = 'extends'

M = TypeVar('M', bound=BaseModel)


def merge_dicts(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge `override` over `base` recursively, returning a new dict and leaving both inputs untouched."""
    merged = dict(base)
    for key, value in override.items():
        base_value = merged.get(key)
        if isinstance(base_value, dict) and isinstance(value, dict):
            merged[key] = merge_dicts(base_value, value)
        else:
            merged[key] = value
    return merged


def load_yaml_dict(filepath: Union[Path, str]) -> dict[str, Any]:
    """Load a yaml file that must contain a mapping at the top level, an empty file is an empty dict."""
    path = Path(filepath)
    if not path.is_file():
        raise ValueError(f"'{filepath}' is not a file")
    with path.open('r') as file:
        contents = yaml.safe_load(file)
    if contents is None:
        return {}
    if not isinstance(contents, dict):
        raise ValueError(f"'{filepath}' cannot be parsed as a dictionary")
    return contents


def load_extended_yaml_dict(filepath: Union[Path, str], *, custom_root: Optional[Path] = None) -> dict[str, Any]:
    """Load a yaml file resolving its `extends` chain.

    Relative `extends` paths are looked up next to the extending file first, then under `custom_root`.
    """
    contents = load_yaml_dict(filepath)
    parent_name = contents.pop(EXTENDS_KEY, None)
    if not parent_name:
        return contents

    parent_path = Path(filepath).parent / str(parent_name)
    if not parent_path.is_file() and custom_root is not None:
        parent_path = custom_root / str(parent_name)

    try:
        parent_contents = load_extended_yaml_dict(parent_path, custom_root=custom_root)
    except RecursionError as e:
        raise ValueError('Cannot parse yaml with recursive extensions.') from e

    return merge_dicts(parent_contents, contents)


def model_from_extended_yaml(model: type[M], *, filepath: str, custom_root: Optional[Path] = None) -> M:
    """Load a yaml file (with `extends` support) and validate it into the given pydantic model."""
    return model.model_validate(load_extended_yaml_dict(filepath, custom_root=custom_root))
