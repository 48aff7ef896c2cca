'''Errors raised while emptying a versioned bucket. None of them are retried.'''

class S3EmptyError(Exception):
    '''Base class for the errors in this module'''


class ListingError(S3EmptyError):
    '''
    Listing the object versions of a bucket failed part way through.

    The pages that were already read are thrown away, the original botocore
    error is available as `__cause__`.
    '''
    def __init__(self, bucket_name: str, message: str):
        self.bucket_name = bucket_name
        super().__init__(f"Listing versions of '{bucket_name}' failed: {message}")


class EmptyBucketError(S3EmptyError):
    '''The listing worked but found no versions and no delete markers'''
    def __init__(self, bucket_name: str):
        self.bucket_name = bucket_name
        super().__init__(f"No objects found in '{bucket_name}'")


class BatchDeleteError(S3EmptyError):
    '''
    A delete_objects call failed, or reported errors for some of its items.

    Attributes:
    `batch_number` int
        1-based position of the failing batch
    `errors` list[str]
        one line per item S3 could not delete, empty when the call itself failed
    '''
    def __init__(self, batch_number: int, message: str, errors: list[str] = None):
        self.batch_number = batch_number
        self.errors = list(errors) if errors else []
        super().__init__(f"Batch {batch_number}: {message}")
