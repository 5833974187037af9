import os
import json


def char_replace(instr):
    for char in ['(', ')', '[', ']', ',', '/', "'", ":", ";", "&", ".", "#", "’"]:
        instr = instr.replace(char, '')
    instr = instr.strip()
    instr = instr.replace(' ', '_')
    return instr.lower()


def makedirs(output, folder):
    folder_dir = os.path.abspath(output + "/" + char_replace(folder))
    if not os.path.exists(folder_dir):
        os.makedirs(folder_dir)
    return folder_dir


def create_character_filename(jsondir, record):
    title = jsondir + "/" + char_replace(record['name']) + ".json"
    return os.path.abspath(title)


def write_character(jsondir, record):
    filename = create_character_filename(jsondir, record)
    with open(filename, 'w', encoding='utf-8') as fp:
        json.dump(record, fp, indent=4, ensure_ascii=False)
    return filename
