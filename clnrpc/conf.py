"""Reading, editing and writing node configuration files."""

from __future__ import annotations

import os
from pathlib import Path

GENERATED_HEADER = (
    "# core lightning configuration generated by coffe please do not edit this"
)

_COMMENT_PREFIX = "comment"
_INCLUDE_PREFIX = "include"


class ParsingError(Exception):
    """A configuration file could not be read or a change was refused."""

    def __init__(self, code: int, cause: str) -> None:
        super().__init__(cause)
        self.code = code
        self.cause = cause

    def __str__(self) -> str:
        return self.cause


class CLNConf:
    """A configuration file: ordered ``key=value`` fields plus included files.

    Comment lines are stored as fields whose key starts with ``comment``.
    """

    def __init__(self, path: str | os.PathLike[str], create_if_missing: bool = False) -> None:
        self.path = os.fspath(path)
        self.create_if_missing = create_if_missing
        self.fields: dict[str, list[str]] = {}
        self.includes: list[CLNConf] = []

    def __repr__(self) -> str:
        return (
            f"CLNConf(path={self.path!r}, fields={self.fields!r}, "
            f"includes={[include.path for include in self.includes]!r})"
        )

    def parser(self) -> "Parser":
        """Return a parser bound to this configuration's file."""
        return Parser(self.path, self.create_if_missing)

    def parse(self) -> None:
        """Load the file, and every file it includes, into this object."""
        self.parser().parse(self)

    def add_conf(self, key: str, val: str) -> None:
        """Add a value for ``key``; the same value twice is refused."""
        values = self.fields.setdefault(key, [])
        if val in values:
            raise ParsingError(2, f"field {key} with value {val} already present")
        values.append(val)

    def get_confs(self, key: str) -> list[str]:
        """Return every value of ``key``, here and in included files."""
        results = list(self.fields.get(key, []))
        for include in self.includes:
            results.extend(include.get_confs(key))
        return results

    def get_conf(self, key: str) -> str | None:
        """Return the single value of ``key``, or None when it is absent.

        Raises ParsingError when the key is defined more than once.
        """
        results = self.get_confs(key)
        if not results:
            return None
        if len(results) > 1:
            raise ParsingError(1, f"multiple field with the `{key}`")
        return results[0]

    def add_subconf(self, conf: "CLNConf") -> None:
        """Add an included configuration; the same path twice is refused."""
        if any(include.path == conf.path for include in self.includes):
            raise ParsingError(2, f"duplicate include {conf.path}")
        self.includes.append(conf)

    def rm_conf(self, key: str, val: str | None = None) -> None:
        """Remove one value of ``key``, or the whole key when ``val`` is None."""
        if key not in self.fields:
            raise ParsingError(2, f"field with `{key}` not present")
        if val is None:
            del self.fields[key]
            return
        try:
            self.fields[key].remove(val)
        except ValueError:
            raise ParsingError(2, f"field {key} with value {val} not found") from None

    def flush(self) -> None:
        """Write the configuration back to its file."""
        Path(self.path).write_text(str(self), encoding="utf-8")

    def __str__(self) -> str:
        lines: list[str] = []
        for key, values in self.fields.items():
            if key.startswith(_COMMENT_PREFIX):
                if values:
                    lines.append(values[0])
                continue
            lines.extend(f"{key}={value}" if value else key for value in values)
        lines.extend(f"{_INCLUDE_PREFIX} {include.path}" for include in self.includes)
        content = "".join(f"{line}\n" for line in lines)
        return f"{content}\n"


class Parser:
    """Parser of the line based configuration syntax."""

    def __init__(self, file_path: str | os.PathLike[str], create_if_missing: bool = False) -> None:
        self.path = Path(file_path)
        self.create_if_missing = create_if_missing

    def _read(self) -> str:
        try:
            if self.create_if_missing and not self.path.exists():
                self.path.write_text(GENERATED_HEADER, encoding="utf-8")
            return self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ParsingError(1, str(exc)) from exc

    def parse(self, conf: CLNConf) -> None:
        """Read the file and add its fields and includes to ``conf``."""
        for line in filter(None, self._read().split("\n")):
            if line.startswith("#"):
                conf.add_conf(f"{_COMMENT_PREFIX} {line}", line.strip())
            elif line.startswith(_INCLUDE_PREFIX):
                if not line.startswith(f"{_INCLUDE_PREFIX} "):
                    raise ParsingError(2, f"malformed include line `{line}`")
                subconf = CLNConf(line[len(_INCLUDE_PREFIX) + 1 :].strip(), False)
                subconf.parse()
                conf.add_subconf(subconf)
            else:
                key, _, value = line.partition("=")
                conf.add_conf(key, value)