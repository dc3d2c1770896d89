"""Field assembly for packaging metadata files."""

from .control import ControlFile, build_control, concat, inclusion_flags, require_fields

__all__ = ["ControlFile", "build_control", "concat", "inclusion_flags", "require_fields"]
