from bson import ObjectId


def new_object_id() -> str:
    return str(ObjectId())


def is_valid_object_id(value) -> bool:
    # Only the 24-hex string form; ObjectId.is_valid would also take raw 12-byte values
    return isinstance(value, str) and ObjectId.is_valid(value)
