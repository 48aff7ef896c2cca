from s3_get import ObjectCollection

# delete_objects refuses more keys than this in one request
MAX_BATCH_SIZE = 1000
PATH_SEPARATOR = "/"

def gen_object_identifier(key: str, version_id: str) -> dict:
    '''Returns the s3 ObjectIdentifier dict for one version of `key`'''
    return {"Key": key, "VersionId": version_id}

def helper_is_directory(key: str) -> bool:
    '''a "folder" placeholder object, its key ends with the path separator'''
    return key.endswith(PATH_SEPARATOR)

def helper_depth(identifier: dict) -> int:
    return identifier["Key"].count(PATH_SEPARATOR)

def helper_chunk(items: list, size: int) -> list[list]:
    '''splits `items` into consecutive lists of at most `size`, never yields an empty one'''
    return [items[i:i + size] for i in range(0, len(items), size)]

def helper_clamp_batch_size(batch_size: int) -> int:
    return max(1, min(int(batch_size), MAX_BATCH_SIZE))

def gen_partition(collection: ObjectCollection) -> tuple[list[dict], list[dict]]:
    '''
    Returns (regular entries, directory entries) as lists of ObjectIdentifier dicts

    Versions are split on helper_is_directory(). Delete markers always go with the
    regular entries, whatever their key looks like, after the regular versions.
    Nothing is reordered here.
    '''
    regular, directories = [], []
    for obj in collection.objects:
        identifier = gen_object_identifier(obj["Key"], obj["VersionId"])
        if helper_is_directory(obj["Key"]):
            directories.append(identifier)
        else:
            regular.append(identifier)
    for marker in collection.delete_markers:
        regular.append(gen_object_identifier(marker["Key"], marker["VersionId"]))
    return regular, directories

def gen_delete_batches(collection: ObjectCollection, batch_size: int = MAX_BATCH_SIZE) -> list[list[dict]]:
    '''
    Returns the ordered list of delete batches for `collection`

    Every regular entry (object versions and delete markers) is deleted before any
    directory placeholder, so the batches are:
        regular entries in listing order, `batch_size` at a time
        then directory entries, deepest first, `batch_size` at a time
    Directory entries with the same number of separators keep their listing order.

    Parameters:
    `collection` ObjectCollection
        what get_object_versions() returned, it is only read
    `batch_size` int
        the most identifiers in one batch, clamped to 1..MAX_BATCH_SIZE
    '''
    assert isinstance(collection, ObjectCollection)
    batch_size = helper_clamp_batch_size(batch_size)

    regular, directories = gen_partition(collection)
    # sorted() is stable with reverse=True too
    directories = sorted(directories, key=helper_depth, reverse=True)

    return helper_chunk(regular, batch_size) + helper_chunk(directories, batch_size)
