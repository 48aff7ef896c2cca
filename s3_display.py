import json

from s3_get import ObjectCollection

VALID_FORMATS = ("json", "pretty-json")

def format_objects(collection: ObjectCollection, fmt: str = "pretty-json") -> str:
    '''
    Renders `collection` as {"Length": ..., "Objects": [...], "DeleteMarkers": [...]}

    Parameters:
    `fmt` str
        "json" for a single line, "pretty-json" for 2 space indentation.
        Callers should check against VALID_FORMATS first, anything else is a ValueError.
    '''
    if fmt == "json":
        return json.dumps(collection.to_dict(), separators=(",", ":"), default=str)
    if fmt == "pretty-json":
        return json.dumps(collection.to_dict(), indent=2, default=str)
    raise ValueError(f"{fmt} is not a valid format, use one of {', '.join(VALID_FORMATS)}")
