# View modes a content item can be rendered in.
VIEW_MODE_FULL = "full"
VIEW_MODE_TEASER = "teaser"

# Words kept from the body when a teaser has no summary.
TEASER_WORDS = 60

# Base render tree keys and weights.
BODY_KEY = "body"
BODY_WEIGHT = 0
LINKS_KEY = "links"
LINKS_WEIGHT = 100
