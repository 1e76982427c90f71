"""Common literal values used across sab_contents.

These constants keep the ``contents.xml`` tag vocabulary and output file names
centralized so extractors, the tree builder, and tests can import the same
values without drifting. Intended for internal use within the sab_contents
package.

Examples
--------
>>> from sab_contents import _constants
>>> _constants.ITEM_TAG
'contents-item'
>>> _constants.DEFAULT_LANG_KEY
'default'
"""

CONTENTS_FILENAME = "contents.xml"
CONTENTS_ASSET_DIR = "contents"

ROOT_TAG = "contents"
ITEMS_TAG = "contents-items"
ITEM_TAG = "contents-item"
SCREENS_TAG = "contents-screens"
SCREEN_TAG = "contents-screen"
SCREEN_ITEMS_TAG = "items"
SCREEN_ITEM_REF_TAG = "item"

TITLE_TAG = "title"
SUBTITLE_TAG = "subtitle"
FEATURES_TAG = "features"
FEATURE_TAG = "feature"
IMAGE_TAG = "image-filename"
AUDIO_TAG = "audio"
AUDIO_FILENAME_TAG = "filename"
LINK_TAG = "link"
LAYOUT_TAG = "layout"
LAYOUT_MODE_TAG = "layout-mode"
LAYOUT_COLLECTION_TAG = "layout-collection"

LANG_ATTRIBUTE = "lang"
DEFAULT_LANG_KEY = "default"

OUTPUT_FORMATS = ("js", "json")
MODULE_TEMPLATE = "contents_module.jinja"
