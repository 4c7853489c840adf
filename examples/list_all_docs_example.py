#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2025 fauna-connection contributors

"""List every document in an index.

Reads FAUNADB_SECRET_KEY from the environment (or a .env file) and prints
each document of the ``all_People`` index, following ``after`` cursors
until the index is exhausted.
"""

import os
import sys

from faunadb.errors import FaunaError

from fauna_connection import create_fauna_connection, load_fauna_config


def main():
    """Print all documents of the index named on the command line."""
    index = sys.argv[1] if len(sys.argv) > 1 else "all_People"

    config = load_fauna_config()
    if not config.secret:
        print("FAUNADB_SECRET_KEY is not set.")
        print("Set it in the environment or in a .env file in", os.getcwd())
        return 1

    fauna = create_fauna_connection(config)

    after = None
    try:
        while True:
            page = fauna.get_all_docs_by_index(index, after=after)
            for doc in page["data"]:
                print("doc:", doc)
            after = page.get("after")
            if after is None:
                break
    except FaunaError as e:
        print(f"✗ Query failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
