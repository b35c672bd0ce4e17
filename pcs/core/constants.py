import re

# Regex Constants
# https://github.com/<owner>/<repo>[.git][/...|?...|#...]
RE_GITHUB_LINK = re.compile(
    r"^https://(?:www\.)?(?i:github\.com)/"
    r"(?P<owner>[A-Za-z0-9-]+)/"
    r"(?P<repo>[A-Za-z0-9_.-]+?)(?:\.git)?"
    r"(?:[/?#].*)?$"
)
RE_LAST_UPDATED = re.compile(r"(?m)^Last Updated: [^\r\n]*")
LAST_UPDATED_PREFIX = "Last Updated: "

# Endpoints
GITHUB_LANGUAGES_URL = "https://api.github.com/repos/{owner}/{repo}/languages"
GITHUB_IMAGE_URL = "https://opengraph.githubassets.com/main/{owner}/{repo}"

# Files
DATA_FILE = "data.json"
IMAGES_DIR = "images"
README_FILE = "README.md"
CONFIG_FILE = "config.json"
IMAGE_EXT = ".png"
TEMP_IMAGE_PREFIX = "temp-image-"

# Timeouts
REQUEST_TIMEOUT_S = 10
DOWNLOAD_CHUNK_SIZE = 64 * 1024

DEFAULT_TIMEZONE = "Asia/Bangkok"
