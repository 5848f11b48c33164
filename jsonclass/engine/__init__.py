"""JSON to class transformation engine.

Three steps: nested object discovery, per-value type inference, and
per-class emission through a language profile.  The engine holds no state;
calling it twice with the same arguments gives byte-identical output.

Quick usage::

    from jsonclass.engine import transform_to_code

    print(transform_to_code("python", '{"address": {"city": "NYC"}}'))
"""

from jsonclass.engine.discovery import (
    DiscoveredClass,
    NameCollisionPolicy,
    discover,
    discover_map,
)
from jsonclass.engine.emitter import emit_class, required_imports
from jsonclass.engine.inference import infer_type, is_date_string
from jsonclass.engine.transformer import (
    DEFAULT_ROOT_CLASS_NAME,
    generate,
    is_error_output,
    parse_json_object,
    transform,
    transform_to_code,
)

__all__ = [
    "DEFAULT_ROOT_CLASS_NAME",
    "DiscoveredClass",
    "NameCollisionPolicy",
    "discover",
    "discover_map",
    "emit_class",
    "generate",
    "infer_type",
    "is_date_string",
    "is_error_output",
    "parse_json_object",
    "required_imports",
    "transform",
    "transform_to_code",
]
