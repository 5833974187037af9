import sys
import os
from optparse import OptionParser
from coc7.convert import CONVERSION_MODES, CONVERT_GUESS
from coc7.sql import get_db_path
from coc7.sql.items import CATALOG_SOURCES


def exec_main(options, args, function):
    if not options.output and not options.dryrun:
        sys.stderr.write("-o/--output required\n")
        sys.exit(1)
    if not options.dryrun and not os.path.exists(options.output):
        sys.stderr.write(
            "-o/--output points to a directory that does not exist\n")
        sys.exit(1)
    if not options.dryrun and not os.path.isdir(options.output):
        sys.stderr.write(
            "-o/--output points to a file, it must point to a directory\n")
        sys.exit(1)
    if options.convert not in CONVERSION_MODES:
        sys.stderr.write("-c/--convert must be one of %s\n"
                         % ", ".join(CONVERSION_MODES))
        sys.exit(1)
    for code in options.items:
        if code not in CATALOG_SOURCES:
            sys.stderr.write("-i/--items codes must be among %s\n"
                             % "".join(CATALOG_SOURCES.keys()))
            sys.exit(1)
    for arg in args:
        function(arg, options)


def exec_load_main(parser, function):
    (options, args) = parser.parse_args()
    if not options.db:
        options.db = get_db_path("catalog.db")
    if options.source not in CATALOG_SOURCES.values():
        sys.stderr.write("-s/--source must be one of %s\n"
                         % ", ".join(CATALOG_SOURCES.values()))
        sys.exit(1)
    function(options.db, args, options.source)


def option_parser(usage):
    parser = OptionParser(usage=usage)
    parser.add_option(
        "-o", "--output", dest="output",
        help="Output data directory. Characters are filed under it. (required)")
    parser.add_option(
        "-d", "--dry-run", dest="dryrun", default=False, action="store_true",
        help="Dry run (no actual output)")
    parser.add_option(
        "-k", "--skip-schema", dest="skip_schema", default=False, action="store_true",
        help="Skip schema validation")
    parser.add_option(
        "-s", "--stdout", dest="stdout", default=False, action="store_true",
        help="Write json to stdout")
    parser.add_option(
        "-l", "--lang", dest="lang", default="en",
        help="Language of the description: en, de, fr or es (default: en)")
    parser.add_option(
        "-e", "--entity", dest="entity", default="npc",
        help="Entity type to create: npc or creature (default: npc)")
    parser.add_option(
        "-c", "--convert", dest="convert", default=CONVERT_GUESS,
        help="Edition conversion: %s (default: %s)"
        % (", ".join(CONVERSION_MODES), CONVERT_GUESS))
    parser.add_option(
        "-i", "--items", dest="items", default="iwms",
        help="Catalog search order: i directory, w world, m module, s system (default: iwms)")
    parser.add_option(
        "-b", "--catalog", dest="catalog",
        help="Sqlite item catalog to match skills, weapons and spells against (default: ~/.coc7/catalog.db when present)")
    parser.add_option(
        "--debug", dest="debug", default=False, action="store_true",
        help="Dump intermediate structures to stderr")
    return parser


def load_option_parser(usage):
    parser = OptionParser(usage=usage)
    parser.add_option("-d", "--db", dest="db",
                      help="Sqlite DB to load into (default: ~/.coc7/catalog.db)")
    parser.add_option("-s", "--source", dest="source", default="directory",
                      help="Catalog source to load under (default: directory)")
    return parser
