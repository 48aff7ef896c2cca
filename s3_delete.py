from botocore.exceptions import BotoCoreError, ClientError

from s3_errors import BatchDeleteError
from s3_generate import MAX_BATCH_SIZE, gen_delete_batches
from s3_get import get_object_versions

def helper_describe_error(error: dict) -> str:
    '''one line for an entry of the delete_objects "Errors" list'''
    return "{}?{} ({}: {})".format(
        error.get("Key"), error.get("VersionId"), error.get("Code"), error.get("Message")
    )

def delete_object_batches(session, bucket_name: str, batches: list[list[dict]], s3_client = None) -> int:
    '''
    Deletes every batch from `bucket_name`, one delete_objects call per batch, in order

    Returns the number of versions and delete markers S3 reported as deleted.
    Stops at the first batch that fails: if the call raises, or if S3 reports errors
    for any of its items, a BatchDeleteError is raised with one line per failed item
    in `errors` and the remaining batches are left alone.

    Parameters:
    `session` boto3.session.Session()
    `bucket_name` str
        the bucket name
    `batches` list[list[dict]]
        ObjectIdentifier lists, usually from gen_delete_batches(), at most 1000 each
    `s3_client` boto3.client("s3")
        Gives the option to pass an existing s3 client
    '''
    assert isinstance(bucket_name, str)
    if s3_client == None: s3_client = session.client("s3")

    deleted = 0
    for number, batch in enumerate(batches, start=1):
        if not batch:
            continue
        assert len(batch) <= MAX_BATCH_SIZE, f"batch {number} has {len(batch)} entries"
        print(f"Attempting to delete {len(batch)} objects")
        try:
            response = s3_client.delete_objects(
                Bucket = bucket_name,
                Delete = {"Objects": batch}
            )
        except ClientError as err:
            raise BatchDeleteError(number, err.response.get("Error", {}).get("Message") or str(err)) from err
        except BotoCoreError as err:
            raise BatchDeleteError(number, str(err)) from err

        errors = response.get("Errors", [])
        if errors:
            raise BatchDeleteError(
                number,
                f"{len(errors)} of {len(batch)} objects could not be deleted",
                [helper_describe_error(e) for e in errors]
            )
        deleted += len(response.get("Deleted", []))
    return deleted

def empty_bucket(session, bucket_name: str, prefix: str = None, batch_size: int = MAX_BATCH_SIZE) -> int:
    '''
    Lists, plans and deletes every object version and delete marker in `bucket_name`

    Returns the number of entries deleted. Any of ListingError, EmptyBucketError
    or BatchDeleteError is passed on to the caller.
    '''
    s3_client = session.client("s3")
    collection = get_object_versions(session, bucket_name, prefix=prefix, s3_client=s3_client)
    batches = gen_delete_batches(collection, batch_size)
    deleted = delete_object_batches(session, bucket_name, batches, s3_client=s3_client)
    print(f"Objects Deleted: {deleted}")
    return deleted
