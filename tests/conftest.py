import boto3
import pytest
from botocore.stub import Stubber

from s3_get import ObjectCollection

BUCKET = "test-bucket"


@pytest.fixture
def session():
    return boto3.session.Session(
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
        region_name="eu-west-1",
    )


@pytest.fixture
def s3_client(session):
    return session.client("s3")


@pytest.fixture
def stubber(s3_client):
    with Stubber(s3_client) as stub:
        yield stub


def version(key, version_id):
    return {"Key": key, "VersionId": version_id, "IsLatest": True}


def marker(key, version_id):
    return {"Key": key, "VersionId": version_id, "IsLatest": False}


def listing_page(versions=(), markers=(), next_marker=None):
    '''a list_object_versions response, truncated when `next_marker` is (key, version_id)'''
    page = {"Versions": list(versions), "DeleteMarkers": list(markers), "IsTruncated": False}
    if next_marker:
        page["IsTruncated"] = True
        page["NextKeyMarker"], page["NextVersionIdMarker"] = next_marker
    return page


def make_collection(keys=(), marker_keys=()):
    collection = ObjectCollection()
    for i, key in enumerate(keys):
        collection.add(key, f"v{i}")
    collection.append_delete_markers([marker(key, f"m{i}") for i, key in enumerate(marker_keys)])
    return collection
