# Models package. Import from the specific submodule
# (e.g. selenium_useragent.models.device).
