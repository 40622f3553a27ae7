#!/usr/bin/env python3
"""Delete a CloudFormation stack.

Useful for development (and doesn't support other deployment targets).

Run from repo root.

"""
import argparse
import logging
import sys
from typing import Optional, Sequence

import boto3

from deploy import SERVICES, get_stack_name


def delete_stack(stack_name: str, delay: int = 5) -> None:
    """Delete a stack and wait until the deletion completes.

    Args:
        stack_name: The name of the CloudFormation stack.
        delay: Seconds between polls of the stack status.

    Raises:
        botocore.exceptions.WaiterError if the deletion fails.

    """
    logging.info(f'Deleting stack {stack_name}...')
    client = boto3.client('cloudformation')
    client.delete_stack(StackName=stack_name)
    waiter = client.get_waiter('stack_delete_complete')
    waiter.wait(StackName=stack_name, WaiterConfig={'Delay': delay})
    logging.info(f'Successfully deleted stack {stack_name}')


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument('-n', '--service_name', type=str,
                        required=True, choices=SERVICES,
                        help='Service name')
    args = parser.parse_args(argv)

    delete_stack(get_stack_name(args.service_name, 'dev'))
    return 0


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    sys.exit(main())
