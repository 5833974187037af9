import os
import json


def get_data(data_name):
    this_file = os.path.abspath(__file__)
    this_dir = os.path.dirname(this_file)
    data_file = os.path.join(this_dir, data_name)
    with open(data_file, encoding='utf-8') as fp:
        return json.load(fp)


def get_strings(lang):
    return get_data("%s.json" % lang)
