from flask import Blueprint

api_bp = Blueprint("api", __name__)

# Import route modules so they register with api_bp
from . import health  # noqa: E402,F401
from . import auth  # noqa: E402,F401
from . import site_config  # noqa: E402,F401
from . import collections  # noqa: E402,F401
from . import custom_codes  # noqa: E402,F401
from . import articles  # noqa: E402,F401
from . import settings  # noqa: E402,F401
from . import support  # noqa: E402,F401
from . import chat  # noqa: E402,F401
from . import preferences  # noqa: E402,F401
from . import uploads  # noqa: E402,F401
from . import logs  # noqa: E402,F401
from . import seo  # noqa: E402,F401
