#!/usr/bin/env python

import argparse
import asyncio
import logging
import sys

from dotenv import find_dotenv, load_dotenv

from groundstation import __version__
from groundstation.base.config import ApiClientConfig
from groundstation.base.errors import CliError, InputError
from groundstation.operators.jobs.api import JobFormCollector, Prompt, assemble_job_request, console_prompt
from groundstation.operators.jobs.client import JobsClient

root_logger = logging.getLogger()
root_logger.setLevel(logging.WARNING)


async def add_job(client: JobsClient, prompt: Prompt) -> int:
    collector = JobFormCollector(prompt)
    try:
        fields = collector.collect()
    except InputError as e:
        print(f"Error collecting input: {e}", file=sys.stderr)
        return 1

    job = assemble_job_request(fields)
    print("\nSubmitting job to ground station...")
    try:
        response = await client.add_job(job)
    except CliError as e:
        print(f"Failed to submit job: {e}", file=sys.stderr)
        return 1

    print(f"Job submitted successfully: {response.status}")
    if response.message:
        print(response.message)
    return 0


async def handle_command(args, config: ApiClientConfig, prompt: Prompt = console_prompt) -> int:
    try:
        client = JobsClient(config)
        await client.start()
    except CliError as e:
        print(f"Failed to initialize API client: {e}", file=sys.stderr)
        return 1
    print(f"API client initialized: {config.base_url}")

    try:
        if args.command == "add-job":
            return await add_job(client, prompt)
        return 1
    finally:
        await client.stop()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Ground Station CLI",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")
    subparsers = parser.add_subparsers(dest="command", title="Commands", metavar="<command>")

    # Sub-command 'add-job'
    subparsers.add_parser("add-job", help="Add a new tracking job to the ground station")

    return parser


def set_verbosity(verbosity: int):
    if verbosity == 1:
        root_logger.setLevel(logging.INFO)
    elif verbosity >= 2:
        root_logger.setLevel(logging.DEBUG)


def main(argv: list[str] = None):
    parser = build_parser()
    args = parser.parse_args(argv)
    set_verbosity(args.verbose)

    if not args.command:
        parser.print_help()
        return

    load_dotenv(find_dotenv(usecwd=True))
    config = ApiClientConfig.from_env()
    sys.exit(asyncio.run(handle_command(args, config)))


if __name__ == "__main__":
    main()
