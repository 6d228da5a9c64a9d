from catalog.utils.ids import coerce_id
from catalog.utils.text import casefold_key, same_key, find_same_key, is_blank
from catalog.utils.jsonio import read_json, write_json
