from bloomcheck.codec.binary import (
    HEADER,
    MAGIC,
    FilterHeader,
    dump,
    dumps,
    load,
    load_file,
    loads,
    read_file_header,
    read_header,
    save,
)

__all__ = [
    "HEADER",
    "MAGIC",
    "FilterHeader",
    "dump",
    "dumps",
    "load",
    "load_file",
    "loads",
    "read_file_header",
    "read_header",
    "save",
]
