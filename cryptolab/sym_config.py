"""The symmetric-encryption configuration file naming key, input and output paths."""

from __future__ import annotations

from dataclasses import astuple, dataclass
from pathlib import Path

CONFIG_PATH = Path("src") / "Partie1" / "config.txt"

_PREFIXES = ("KEY_PATH ", "INPUT_PATH ", "OUTPUT_PATH ")
_MAX_LINE = 199


@dataclass(frozen=True)
class SymConfig:
    """Paths used by the file-based encryption methods."""

    key_path: str
    input_path: str
    output_path: str


def set_config(
    key_path: str | Path,
    input_path: str | Path,
    output_path: str | Path,
    config_path: str | Path = CONFIG_PATH,
) -> SymConfig:
    """Write the three paths to the configuration file and return them."""
    config = SymConfig(str(key_path), str(input_path), str(output_path))
    path = Path(config_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    text = "".join(f"{prefix}{value}\n" for prefix, value in zip(_PREFIXES, astuple(config)))
    path.write_bytes(text.encode("utf-8"))
    return config


def get_config(config_path: str | Path = CONFIG_PATH) -> SymConfig:
    """Read the configuration file; lines longer than 199 characters are cut."""
    lines = Path(config_path).read_bytes().decode("utf-8").split("\n")
    values = []
    for prefix, line in zip(_PREFIXES, lines):
        line = line.split("\0", 1)[0][:_MAX_LINE]
        if not line.startswith(prefix):
            raise ValueError(f"malformed configuration line, expected {prefix.strip()}")
        values.append(line[len(prefix):])
    if len(values) != len(_PREFIXES):
        raise ValueError("incomplete configuration file")
    return SymConfig(*values)