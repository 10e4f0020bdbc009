"""Example CLI: a table of people keyed by integer id."""
import argparse
import logging
import sys
from dataclasses import dataclass

from recordstore.core.codec import CompositeCodec, INT32, STRING
from recordstore.core.errors import RecordStoreError, RecordNotFoundError
from recordstore.core.store import RecordStore
from recordstore.utils.config import Config


@dataclass
class Person:
    age: int
    name: str


PERSON_CODEC = CompositeCodec(Person, [('age', INT32), ('name', STRING)])


def open_people(data_file: str, index_file: str) -> RecordStore:
    """Open a store of Person records keyed by INT32 id."""
    return RecordStore(data_file, index_file, INT32, PERSON_CODEC)


def handle_insert(store, args):
    """Handle INSERT command."""
    if args.age is None or args.name is None:
        print("Error: INSERT requires age and name")
        return 1
    result = store.insert(args.key, Person(args.age, args.name))
    print("OK" if result else "ERROR")
    return 0 if result else 1


def handle_get(store, args):
    """Handle GET command."""
    try:
        person = store.retrieve(args.key)
    except RecordNotFoundError:
        print("NOT_FOUND")
        return 1
    print(f"{args.key}: age={person.age} name={person.name}")
    return 0


def handle_delete(store, args):
    """Handle DELETE command."""
    result = store.delete(args.key)
    print("OK" if result else "NOT_FOUND")
    return 0 if result else 1


def handle_demo(store, args):
    """Insert person 1 and read their name back."""
    store.insert(1, Person(10, "Bob"))
    print(store.retrieve(1).name)
    return 0


def main(argv=None):
    """Main entry point for people CLI."""
    parser = argparse.ArgumentParser(description='Record store example: people table')
    parser.add_argument('--data-file', default=Config.DATA_FILENAME,
                        help=f'Data file (default: {Config.DATA_FILENAME})')
    parser.add_argument('--index-file', default=Config.INDEX_FILENAME,
                        help=f'Index file (default: {Config.INDEX_FILENAME})')
    parser.add_argument('--log-level', default=Config.LOG_LEVEL,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help=f'Logging level (default: {Config.LOG_LEVEL})')
    parser.add_argument('command', choices=['insert', 'get', 'delete', 'demo'],
                        help='Command to execute')
    parser.add_argument('key', type=int, nargs='?', help='Person id')
    parser.add_argument('age', type=int, nargs='?', help='Age (for INSERT)')
    parser.add_argument('name', nargs='?', help='Name (for INSERT)')
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format=Config.LOG_FORMAT)

    if args.command != 'demo' and args.key is None:
        print(f"Error: {args.command.upper()} requires a key")
        return 1

    handlers = {
        'insert': handle_insert,
        'get': handle_get,
        'delete': handle_delete,
        'demo': handle_demo,
    }

    try:
        with open_people(args.data_file, args.index_file) as store:
            return handlers[args.command](store, args)
    except RecordStoreError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
