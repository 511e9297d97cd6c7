"""Registry of the validator's issue descriptors, grouped by error class."""

from __future__ import annotations

from validator_build.lib.issues.models import ErrorClass, IssueType, Severity

ERROR = Severity.ERROR
WARNING = Severity.WARNING
INFORMATION = Severity.INFORMATION


IO_ERROR = ErrorClass("IoError", (
    IssueType("IO_ERROR", "{0}"),
    IssueType("NON_RELATIVE_URI", "Non-relative URI found: {0}.", WARNING),
))

SCHEMA_ERROR = ErrorClass("SchemaError", (
    IssueType(
        "ARRAY_LENGTH_NOT_IN_LIST",
        "Invalid array length {0}. Valid lengths are: {1}.",
        expects_array_argument=True,
    ),
    IssueType("ARRAY_TYPE_MISMATCH", "Type mismatch. Array element {0} is not a {1}."),
    IssueType("DUPLICATE_ELEMENTS", "Duplicate element."),
    IssueType("EMPTY_ENTITY", "Entity cannot be empty."),
    IssueType("INVALID_INDEX", "Index must be a non-negative integer."),
    IssueType("INVALID_JSON", "Invalid JSON data. Parser output: {0}"),
    IssueType("INVALID_URI", "Invalid URI {0}. Parser output: {1}"),
    IssueType(
        "ONE_OF_MISMATCH",
        "Exactly one of {1} properties must be defined in {0}.",
        expects_array_argument=True,
    ),
    IssueType("PATTERN_MISMATCH", "Value {0} does not match regexp pattern {1}."),
    IssueType("TYPE_MISMATCH", "Type mismatch. Property value {0} is not a {1}."),
    IssueType("UNDEFINED_PROPERTY", "Property {0} must be defined."),
    IssueType("UNEXPECTED_PROPERTY", "Unexpected property.", WARNING),
    IssueType("UNSATISFIED_DEPENDENCY", "Dependency failed. {0} must be defined."),
    IssueType("VALUE_MULTIPLE_OF", "Value {0} is not a multiple of {1}."),
    IssueType(
        "VALUE_NOT_IN_LIST",
        "Invalid value {0}. Valid values are {1}.",
        WARNING,
        expects_array_argument=True,
    ),
    IssueType("VALUE_NOT_IN_RANGE", "Value {0} is out of range."),
))

SEMANTIC_ERROR = ErrorClass("SemanticError", (
    IssueType(
        "ACCESSOR_MATRIX_ALIGNMENT",
        "Matrix accessors must be aligned to 4-byte boundaries.",
    ),
    IssueType(
        "ACCESSOR_NORMALIZED_INVALID",
        "Only (u)byte and (u)short accessors can be normalized.",
    ),
    IssueType(
        "ACCESSOR_OFFSET_ALIGNMENT",
        "Offset {0} is not a multiple of componentType length {1}.",
    ),
    IssueType(
        "ASSET_MIN_VERSION_GREATER_THAN_VERSION",
        "Asset minVersion {0} is greater than version {1}.",
    ),
    IssueType(
        "BUFFER_DATA_URI_MIME_TYPE_INVALID",
        "Buffer's Data URI MIME-Type must be 'application/octet-stream' or "
        "'application/gltf-buffer'. Found {0} instead.",
    ),
    IssueType("CAMERA_XMAG_YMAG_ZERO", "xmag and ymag must not be zero.", WARNING),
    IssueType("CAMERA_ZFAR_LEQUAL_ZNEAR", "zfar must be greater than znear."),
    IssueType("MESH_PRIMITIVE_INVALID_ATTRIBUTE", "Invalid attribute name {0}."),
    IssueType(
        "NODE_MATRIX_TRS",
        "A node can have either a matrix or any combination of "
        "translation/rotation/scale (TRS) properties.",
    ),
    IssueType("UNKNOWN_ASSET_MAJOR_VERSION", "Unknown glTF major asset version: {0}."),
    IssueType(
        "UNKNOWN_ASSET_MINOR_VERSION",
        "Unknown glTF minor asset version: {0}.",
        WARNING,
    ),
))

LINK_ERROR = ErrorClass("LinkError", (
    IssueType(
        "ACCESSOR_TOTAL_OFFSET_ALIGNMENT",
        "Accessor's total byteOffset {0} isn't a multiple of componentType length {1}.",
    ),
    IssueType(
        "BUFFER_VIEW_TOO_LONG",
        "BufferView does not fit buffer ({0}) byteLength ({1}).",
    ),
    IssueType(
        "MESH_PRIMITIVE_ACCESSOR_WITHOUT_BYTESTRIDE",
        "bufferView.byteStride must be defined when two or more accessors "
        "use the same buffer view.",
    ),
    IssueType("NODE_LOOP", "Node is a part of a node loop."),
    IssueType("NODE_PARENT_OVERRIDE", "Value overrides parent of node {0}."),
    IssueType("UNRESOLVED_REFERENCE", "Unresolved reference: {0}."),
    IssueType("UNUSED_OBJECT", "This object may be unused.", INFORMATION),
))

DATA_ERROR = ErrorClass("DataError", (
    IssueType(
        "ACCESSOR_INDEX_OOB",
        "Indices accessor element at index {0} has value {1} that is greater "
        "than the maximum vertex index available ({2}).",
    ),
    IssueType("ACCESSOR_INVALID_FLOAT", "Accessor element at index {0} is NaN or Infinity."),
    IssueType(
        "ACCESSOR_MAX_MISMATCH",
        "Declared maximum value for this component ({0}) does not match "
        "actual maximum ({1}).",
    ),
    IssueType(
        "ACCESSOR_MIN_MISMATCH",
        "Declared minimum value for this component ({0}) does not match "
        "actual minimum ({1}).",
    ),
    IssueType(
        "BUFFER_EXTERNAL_BYTELENGTH_MISMATCH",
        "Actual data length {0} is less than the declared buffer byteLength {1}.",
    ),
    IssueType("IMAGE_DATA_INVALID", "Image data is invalid. {0}"),
    IssueType(
        "IMAGE_MIME_TYPE_INVALID",
        "Recognized image format {0} does not match declared image format {1}.",
    ),
    IssueType("IMAGE_UNRECOGNIZED_FORMAT", "Image format not recognized.", WARNING),
))

GLB_ERROR = ErrorClass("GlbError", (
    IssueType(
        "GLB_CHUNK_LENGTH_UNALIGNED",
        "Length of {0} chunk is not aligned to 4-byte boundaries.",
    ),
    IssueType("GLB_CHUNK_TOO_BIG", "Chunk ({0}) length ({1}) does not fit total GLB length."),
    IssueType("GLB_DUPLICATE_CHUNK", "Chunk of type {0} has already been used."),
    IssueType("GLB_INVALID_MAGIC", "Invalid GLB magic value ({0})."),
    IssueType("GLB_INVALID_VERSION", "Invalid GLB version value {0}."),
    IssueType("GLB_LENGTH_MISMATCH", "Declared GLB length ({0}) is too small."),
    IssueType("GLB_UNEXPECTED_END_OF_CHUNK_DATA", "Unexpected end of chunk data."),
    IssueType("GLB_UNEXPECTED_END_OF_HEADER", "Unexpected end of header."),
    IssueType("GLB_UNKNOWN_CHUNK_TYPE", "Unknown GLB chunk type: {0}.", WARNING),
))


# Catalog order
ERROR_CLASSES: tuple[ErrorClass, ...] = (
    IO_ERROR,
    SCHEMA_ERROR,
    SEMANTIC_ERROR,
    LINK_ERROR,
    DATA_ERROR,
    GLB_ERROR,
)


def all_issue_types() -> list[IssueType]:
    """Every registered descriptor, in catalog order."""
    return [issue for error_class in ERROR_CLASSES for issue in error_class.issues]
