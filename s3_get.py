import queue
import threading

from botocore.exceptions import BotoCoreError, ClientError

from s3_errors import EmptyBucketError, ListingError

# a page handed to the consumer thread, None closes the hopper
_END_OF_PAGES = None


class ObjectCollection:
    '''
    Every object version and delete marker found in a bucket.

    `objects` holds {"Key": ..., "VersionId": ...} dicts, `delete_markers` holds the
    DeleteMarkers entries exactly as S3 returned them.
    Only add() and append_delete_markers() should change it, they keep `count` in step.
    '''
    def __init__(self):
        self.count = 0
        self.objects = []
        self.delete_markers = []

    def add(self, key: str, version_id: str):
        self.objects.append({"Key": key, "VersionId": version_id})
        self.count += 1

    def append_delete_markers(self, delete_markers: list[dict]):
        self.delete_markers.extend(delete_markers)
        self.count += len(delete_markers)

    def to_dict(self) -> dict:
        return {
            "Length": self.count,
            "Objects": self.objects,
            "DeleteMarkers": self.delete_markers,
        }


def helper_aggregate_pages(hopper: queue.Queue, collection: ObjectCollection, failures: list):
    '''
    consumer side of get_object_versions(), runs until it reads the end marker.
    After a bad page it keeps draining the hopper so the paginator never blocks forever.
    '''
    while True:
        page = hopper.get()
        if page is _END_OF_PAGES:
            return
        if failures:
            continue
        try:
            for version in page.get("Versions", []):
                collection.add(version["Key"], version["VersionId"])
            collection.append_delete_markers(page.get("DeleteMarkers", []))
        except (KeyError, TypeError, AttributeError) as err:
            failures.append(err)


def get_object_versions(session, bucket_name: str, prefix: str = None, s3_client = None) -> ObjectCollection:
    '''
    Returns an ObjectCollection with every object version and delete marker in `bucket_name`

    The list_object_versions paginator runs in the calling thread and hands each page
    to a second thread through a queue with a single slot, so the paginator waits
    whenever the previous page has not been aggregated yet.
    Page order and the order of the entries inside a page are kept.

    Raises ListingError if any page fails (nothing already read is returned)
    and EmptyBucketError if the bucket holds no versions and no delete markers.

    Parameters:
    `session` boto3.session.Session()
    `bucket_name` str
        the bucket to list
    `prefix` str
        only list keys starting with `prefix`, defaults to None for the whole bucket
    `s3_client` boto3.client("s3")
        Gives the option to pass an existing s3 client, one is made from `session` otherwise
    '''
    assert isinstance(bucket_name, str)
    if s3_client == None: s3_client = session.client("s3")

    request = {"Bucket": bucket_name}
    if prefix: #!= None or ""
        assert isinstance(prefix, str)
        request["Prefix"] = prefix

    collection = ObjectCollection()
    failures = []
    hopper = queue.Queue(maxsize=1)
    aggregator = threading.Thread(
        target=helper_aggregate_pages, args=(hopper, collection, failures), daemon=True
    )
    aggregator.start()

    try:
        for page in s3_client.get_paginator("list_object_versions").paginate(**request):
            hopper.put(page)
    except ClientError as err:
        raise ListingError(bucket_name, err.response.get("Error", {}).get("Message") or str(err)) from err
    except BotoCoreError as err:
        raise ListingError(bucket_name, str(err)) from err
    finally:
        # the consumer has to drain everything before we look at the collection
        hopper.put(_END_OF_PAGES)
        aggregator.join()

    if failures:
        raise ListingError(bucket_name, f"unreadable page: {failures[0]!r}") from failures[0]
    if collection.count == 0:
        raise EmptyBucketError(bucket_name)
    return collection
