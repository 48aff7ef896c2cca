'''
Empties a versioned S3 bucket: every object version and every delete marker is removed.

Example:
    s3-empty --bucket-name my-bucket --profile dev --dry-run
    s3-empty --bucket-name my-bucket --show-objects --format json
'''
import argparse
import os
import sys

import boto3
from botocore.exceptions import BotoCoreError

from s3_delete import delete_object_batches
from s3_display import VALID_FORMATS, format_objects
from s3_errors import BatchDeleteError, S3EmptyError
from s3_generate import gen_delete_batches
from s3_get import get_object_versions

__version__ = "0.1.0"

DEFAULT_REGION = "eu-west-1"

def helper_parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="s3-empty", description="Empty a versioned S3 bucket.")
    parser.add_argument("--bucket-name", required=True, help="Name of the bucket to empty.")
    parser.add_argument("--profile", default=None, help="AWS Profile to use, if there is one.")
    parser.add_argument("--aws-region", default=None,
                        help="Region for the aws connection. Overrides AWS_REGION, "
                             f"{DEFAULT_REGION} is used when neither is set.")
    parser.add_argument("--format", default="pretty-json", choices=VALID_FORMATS,
                        help="Output format for --dry-run and --show-objects.")
    parser.add_argument("--dry-run", action="store_true", help="Show versions to be deleted, delete nothing.")
    parser.add_argument("--show-objects", action="store_true",
                        help="Show the objects before attempting to delete them.")
    parser.add_argument("-v", "--version", action="version", version=__version__)
    return parser.parse_args(argv)

def gen_region(aws_region: str = None) -> str:
    '''`aws_region`, else $AWS_REGION, else DEFAULT_REGION'''
    return aws_region or os.environ.get("AWS_REGION") or DEFAULT_REGION

def gen_session(profile: str = None, aws_region: str = None):
    '''Returns a boto3.session.Session() for `profile` (default credential chain if None)'''
    return boto3.session.Session(profile_name=profile or None, region_name=gen_region(aws_region))

def main(argv=None) -> int:
    args = helper_parse_args(argv)
    try:
        session = gen_session(args.profile, args.aws_region)
        s3_client = session.client("s3")
    except BotoCoreError as err:
        print(f"There was an error getting your AWS Creds. Error: {err}", file=sys.stderr)
        return 1

    try:
        collection = get_object_versions(session, args.bucket_name, s3_client=s3_client)
    except S3EmptyError as err:
        print(f"There was an error listing the objects for your specified bucket '{args.bucket_name}'.",
              f"Error: {err}", sep="\n", file=sys.stderr)
        return 1

    if args.dry_run or args.show_objects:
        print(format_objects(collection, args.format))
    if args.dry_run:
        return 0

    batches = gen_delete_batches(collection)
    try:
        deleted = delete_object_batches(session, args.bucket_name, batches, s3_client=s3_client)
    except BatchDeleteError as err:
        print(f"There was an error deleting objects. Error: {err}", file=sys.stderr)
        print("Raw Request Errors:", *err.errors, sep="\n", file=sys.stderr)
        return 1

    print(f"Objects Deleted: {deleted}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
