# coding: utf8
import os

from dotenv import load_dotenv

dotenv_path = os.path.join(os.path.dirname(__file__), ".env")
load_dotenv(dotenv_path=dotenv_path, override=True)

from storefront import create_app  # noqa: E402
from storefront.config import configs as config  # noqa: E402
from storefront.extensions import db  # noqa: E402

config_name = os.environ.get("FLASK_CONFIG") or "develop"
config_app = config[config_name]
application = create_app(config_app)


@application.cli.command("create-db")
def create_db():
    """Create every table that does not exist yet."""
    db.create_all()


if __name__ == "__main__":
    application.run()
