#!/usr/bin/env python
from coc7.options import exec_main, option_parser
from coc7.character import import_file


def option_parser_import():
    usage = "usage: %prog [options] [filenames]\n"
    usage += "Imports free form Call of Cthulhu character descriptions into json"
    return option_parser(usage)


def main():
    parser = option_parser_import()
    (options, args) = parser.parse_args()
    exec_main(options, args, import_file)


if __name__ == "__main__":
    main()
