"""
Functions to write analysis summaries as json

Functions
---------
write_to_json
    Write a nested dictionary to a json file
get_pretty_dic_str
    Make a nice indented string representation of a nested dictionary
"""
import json
from pathlib import Path


def write_to_json(filepath, dic):
    """Write dict out as JSON file, creating missing parent folders"""
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(str(path), "w") as f:
        f.write(get_pretty_dic_str(dic))


def get_pretty_dic_str(dic):
    """Get a sorted and indented json string from a dict"""
    return json.dumps(dic, indent=4, sort_keys=True)
