#!/usr/bin/env python
from coc7.options import exec_load_main, load_option_parser
from coc7.catalog import load_catalog


def main():
    usage = "usage: %prog [options] [filenames]\n"
    usage += "Loads json item files into the sqlite item catalog"
    parser = load_option_parser(usage)
    exec_load_main(parser, load_catalog)


if __name__ == "__main__":
    main()
