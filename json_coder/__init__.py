"""json-coder - typed encode/decode on top of a dynamic JSON value tree."""

__version__ = "0.1.0"
__author__ = "YC Math"

# 주요 클래스들 export
from .json_value import JSON, Kind
from .url import URL
from .errors import (
    JSONEncodingError,
    UnencodableType,
    FailedToCreateFile,
    EncodingDepthExceeded,
    JSONDecodingError,
    MissingKey,
    InvalidURL,
    UnexpectedArrayElement,
    FileNotFound,
    BadDictionary,
    DecodingDepthExceeded,
)
from .shapes import Shape, ShapeSpec, FieldPlan, field_plan
from .encoder import (
    JSONEncodable,
    derive_encoder,
    encode_null,
    encode_json,
    encode_bool,
    encode_int,
    encode_float,
    encode_string,
    encode_url,
    encode_string_list,
    encode_encodable,
    encode_encodable_list,
    encode_encodable_dict,
    encode_value,
)
from .decoder import (
    JSONDecodable,
    decode,
    decode_json,
    decode_string,
    decode_int,
    decode_bool,
    decode_url,
    decode_regex,
    decode_decodable,
    decode_list,
    decode_string_list,
    decode_regex_list,
    decode_string_dict,
    decode_dict,
)
from .codable import JSONCodable

__all__ = [
    "JSON",
    "Kind",
    "URL",
    "JSONEncodingError",
    "UnencodableType",
    "FailedToCreateFile",
    "EncodingDepthExceeded",
    "JSONDecodingError",
    "MissingKey",
    "InvalidURL",
    "UnexpectedArrayElement",
    "FileNotFound",
    "BadDictionary",
    "DecodingDepthExceeded",
    "Shape",
    "ShapeSpec",
    "FieldPlan",
    "field_plan",
    "JSONEncodable",
    "derive_encoder",
    "encode_null",
    "encode_json",
    "encode_bool",
    "encode_int",
    "encode_float",
    "encode_string",
    "encode_url",
    "encode_string_list",
    "encode_encodable",
    "encode_encodable_list",
    "encode_encodable_dict",
    "encode_value",
    "JSONDecodable",
    "decode",
    "decode_json",
    "decode_string",
    "decode_int",
    "decode_bool",
    "decode_url",
    "decode_regex",
    "decode_decodable",
    "decode_list",
    "decode_string_list",
    "decode_regex_list",
    "decode_string_dict",
    "decode_dict",
    "JSONCodable",
]
