# pylint: skip-file
# Module for holding types, for easy importing into the rest of the codebase
from __future__ import annotations

# The only things that should be available during runtime.
from typing import TYPE_CHECKING, TypeVar, cast

if TYPE_CHECKING:
    from typing import (
        Any,
        Callable,
        Generator,
        Iterable,
        Literal,
        Protocol,
        Sequence,
        TextIO,
        TypeAlias,
    )

    from lxml import etree

    # Only in typing from 3.13 on
    from typing_extensions import TypeIs

    ElementT: TypeAlias = etree._Element
