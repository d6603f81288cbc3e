import os
from practice_site import create_app

app = create_app(os.getenv("FLASK_CONFIG", "development"))
