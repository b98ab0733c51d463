import argparse
import io
import logging
import sys

from kotoba.machine import Machine, MachineError, SourceUnreadable
from kotoba.natives import install, read_source

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog='kotoba', description='Run kotoba programs.')
    parser.add_argument('files', nargs='*',
                        help='source files to run in order ("-" is stdin)')
    parser.add_argument('-e', '--eval', dest='text', metavar='TEXT',
                        help='program text to run after the files')
    parser.add_argument('--encoding', default='utf-8',
                        help='encoding of the sources (default: utf-8)')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='log what the machine does')
    return parser.parse_args(argv)


def read_stdin(encoding):
    stdin = io.TextIOWrapper(sys.stdin.buffer, encoding=encoding)
    try:
        return stdin.read()
    except UnicodeDecodeError as e:
        raise SourceUnreadable('cannot read standard input: %s' % (e,))
    finally:
        # leave sys.stdin.buffer open
        stdin.detach()


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(format='%(name)s: %(levelname)s: %(message)s')
    logging.getLogger('kotoba').setLevel(
        logging.DEBUG if args.verbose else logging.WARNING)

    sources = list(args.files)
    if not sources and args.text is None:
        sources = ['-']

    machine = Machine()
    install(machine, encoding=args.encoding)
    try:
        for name in sources:
            logger.debug('running %s', name)
            if name == '-':
                machine.run(read_stdin(args.encoding))
            else:
                machine.run(read_source(name, args.encoding))
        if args.text is not None:
            machine.run(args.text)
    except MachineError as e:
        sys.stdout.flush()
        sys.stderr.write('%s: %s\n' % (type(e).__name__, e))
        return 1

    if machine.compile_depth > 0:
        logger.warning('input ended inside an unfinished definition')
    return 0


if __name__ == '__main__':
    sys.exit(main())
