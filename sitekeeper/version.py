from pathlib import Path


def get_version(filename=Path(__file__).parent / 'version'):
    return open(filename, 'r').read().strip()
