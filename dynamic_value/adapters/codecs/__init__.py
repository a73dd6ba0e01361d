# dynamic_value/adapters/codecs/__init__.py

"""Text and file codecs for dynamic values"""

# Local imports
from dynamic_value.adapters.codecs.csv_codec import decode_field
from dynamic_value.adapters.codecs.csv_codec import encode_field
from dynamic_value.adapters.codecs.csv_codec import parse_csv
from dynamic_value.adapters.codecs.csv_codec import read_csv_file
from dynamic_value.adapters.codecs.csv_codec import serialize_csv
from dynamic_value.adapters.codecs.csv_codec import serialize_csv_named
from dynamic_value.adapters.codecs.csv_codec import write_csv_file
from dynamic_value.adapters.codecs.json_codec import parse_json
from dynamic_value.adapters.codecs.json_codec import read_json_file
from dynamic_value.adapters.codecs.json_codec import serialize_json
from dynamic_value.adapters.codecs.json_codec import write_json_file

__all__: list[str] = [
    "decode_field",
    "encode_field",
    "parse_csv",
    "parse_json",
    "read_csv_file",
    "read_json_file",
    "serialize_csv",
    "serialize_csv_named",
    "serialize_json",
    "write_csv_file",
    "write_json_file",
]
