# topmark:header:start
#
#   project      : CmdCatalog
#   file         : __init__.py
#   file_relpath : src/cmdcatalog/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CmdCatalog configuration: TOML discovery, layered merge and logging setup.

Typical usage:

```python
from cmdcatalog.config import MutableConfig

config = MutableConfig.load_merged().apply_cli_args({"output_format": "html"}).freeze()
```
"""

from __future__ import annotations

from cmdcatalog.config.model import ArgsLike, Config, MutableConfig

__all__: list[str] = ["ArgsLike", "Config", "MutableConfig"]
