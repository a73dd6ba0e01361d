# dynamic_value/core/types/json.py

"""JSON type definitions for the plain-data side of value conversion."""

# JSON Type Usage Guide:
# - JSONDict: When you KNOW it's a dict with string keys (e.g., decoded JSON objects, config files)
# - JSONList: When you KNOW it's a list (e.g., decoded JSON arrays, CSV rows)
# - JSONType: When it could be anything JSON can hold
# - Inside the library prefer Value; these only describe what json.loads/dumps see

type JSONPrimitive = str | int | float | bool | None

type JSONType = JSONDict | JSONList | JSONPrimitive
type JSONDict = dict[str, JSONType]
type JSONList = list[JSONType]

__all__ = ["JSONPrimitive", "JSONType", "JSONDict", "JSONList"]
