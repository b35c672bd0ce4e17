#!/usr/bin/env python3
# Project catalog sync (data.json -> GitHub languages + preview images -> README stamp)
#
# Files (relative to the working directory, overridable in config.json):
# - data.json     catalog of projects, keyed by id
# - images/       preview images, one <repo>.png per GitHub-linked entry
# - README.md     holds the "Last Updated: ..." line
# - config.json   optional overrides (paths, timezone, timeout, user_agent, log_dir)

from pcs.core.pipeline import main

if __name__ == "__main__":
    main()
