import logging
from pathlib import Path

import pytest

SAMPLE_SURFACES = (
    "// sample shell\r\n"
    "charset,UTF-8\r\n"
    "\r\n"
    "descript\r\n"
    "{\r\n"
    "version,1\r\n"
    "maxwidth,320\r\n"
    "}\r\n"
    "\r\n"
    "// base pose\r\n"
    "surface0\r\n"
    "{\r\n"
    "element0,base,surface0.png,0,0\r\n"
    "0interval,sometimes\r\n"
    "0pattern0,100,5,overlay,0,0\r\n"
    "collision0,10,10,50,50,Head\r\n"
    "}\r\n"
    "sakura.surface.alias\r\n"
    "{\r\n"
    "照れ,[1,101,201]\r\n"
    "}\r\n"
    "sakura.cursor\r\n"
    "{\r\n"
    "mouseup0,Head,system:hand\r\n"
    "}\r\n"
    "sakura.tooltips\r\n"
    "{\r\n"
    "Head,頭\r\n"
    "}\r\n"
)


@pytest.fixture
def sample_text() -> str:
    return SAMPLE_SURFACES


@pytest.fixture
def write_surfaces(tmp_path):
    """Write bytes (or UTF-8 text) to a surfaces.txt under tmp_path."""

    def _write(content, name: str = "surfaces.txt") -> Path:
        path = tmp_path / name
        if isinstance(content, str):
            content = content.encode("utf-8")
        path.write_bytes(content)
        return path

    return _write


@pytest.fixture(autouse=True)
def reset_seriko_logger():
    yield
    logger = logging.getLogger("seriko")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
