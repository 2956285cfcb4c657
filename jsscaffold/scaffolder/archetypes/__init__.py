"""One module per project type, each exposing ``build_file_tree``."""

from . import electron, express, nest, nextjs, nodejs, react, react_native

__all__ = [
    "electron",
    "express",
    "nest",
    "nextjs",
    "nodejs",
    "react",
    "react_native",
]
