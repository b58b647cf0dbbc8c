# frontend/admin/__init__.py
from flask import Blueprint

admin_bp = Blueprint("admin", __name__, url_prefix="/admin")

# Route modules attach their views to admin_bp
from . import routes             # dashboard  # noqa: E402,F401
from . import brand_routes       # brands  # noqa: E402,F401
from . import slider_routes      # home page sliders  # noqa: E402,F401
from . import category_routes    # categories, subcategories  # noqa: E402,F401
from . import attribute_routes   # attributes + values  # noqa: E402,F401
from . import product_routes     # product forms, listing, detail  # noqa: E402,F401
from . import user_routes        # users  # noqa: E402,F401
from . import image_routes       # image library + cropper  # noqa: E402,F401
