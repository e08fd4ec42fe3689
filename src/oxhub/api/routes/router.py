from fastapi import APIRouter

from src.oxhub.api.routes import auth, companies, products
from src.oxhub.core.config import get_settings

api_router = APIRouter(prefix=get_settings().api_prefix)
api_router.include_router(auth.router)
api_router.include_router(companies.router)
api_router.include_router(products.router)
