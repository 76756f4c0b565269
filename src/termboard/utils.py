from __future__ import annotations

import json
import logging
import os
import re
import subprocess
import sys
from typing import IO, Any

logger = logging.getLogger(__name__)

URL_OPENERS = {
    "linux": ["xdg-open"],
    "darwin": ["open"],
    "win32": ["rundll32", "url.dll,FileProtocolHandler"],
}
FILE_OPENERS = {
    "linux": ["xdg-open"],
    "darwin": ["open"],
    "win32": ["explorer"],
}

def execute_command(args: list[str] | None) -> str:
    if not args:
        return ""
    try:
        proc = subprocess.run(args, stdout=subprocess.PIPE, text=True, check=True)
    except (OSError, subprocess.CalledProcessError) as e:
        return f"{e}\n"
    return proc.stdout

def find_match(pattern: str, data: str) -> list[list[str]]:
    return [[m.group(0), *m.groups("")] for m in re.finditer(pattern, data)]

def parse_json(stream: IO[str]) -> Any:
    text = stream.read()
    decoder = json.JSONDecoder()
    obj = None
    idx = 0
    while True:
        while idx < len(text) and text[idx].isspace():
            idx += 1
        if idx >= len(text):
            break
        obj, idx = decoder.raw_decode(text, idx)
    return obj

def expand_home_dir(path: str) -> str:
    return os.path.expanduser(path)

def _opener(table: dict[str, list[str]]) -> list[str]:
    # The BSDs fall through to xdg-open
    return table.get(sys.platform, ["xdg-open"])

def open_file(path: str) -> None:
    if path.startswith(("http://", "https://")):
        try:
            subprocess.Popen([*_opener(URL_OPENERS), path])
        except OSError as e:
            logger.warning("Could not open %s: %s", path, e)
        return

    out = execute_command([*_opener(FILE_OPENERS), expand_home_dir(path)])
    if out.strip():
        logger.debug("Opener output for %s: %s", path, out.strip())
