# Bundled device dataset and its loader.
