import os

# --- Dictionary files ---
DATA_DIR = os.getenv('SELD_DATA_DIR', 'data')
INDEX_FILE = os.getenv('SELD_INDEX_FILE', 'SELD.idx')
DICT_FILE = os.getenv('SELD_DICT_FILE', 'SELD.dict')

INDEX_PATH = os.path.join(DATA_DIR, INDEX_FILE)
DICT_PATH = os.path.join(DATA_DIR, DICT_FILE)

# --- Query limits ---
SEARCH_LIMIT = int(os.getenv('SELD_SEARCH_LIMIT', '30'))
LIST_LIMIT = int(os.getenv('SELD_LIST_LIMIT', '20'))
MAX_SEARCH_LIMIT = int(os.getenv('SELD_MAX_SEARCH_LIMIT', '200'))

# --- Server ---
LOG_LEVEL = os.getenv('SELD_LOG_LEVEL', 'INFO').upper()
CORS_ORIGINS = [o.strip() for o in os.getenv('SELD_CORS_ORIGINS', '*').split(',') if o.strip()]
