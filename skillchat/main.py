import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi import _rate_limit_exceeded_handler
import sentry_sdk

from skillchat.api.v1.health import router as health_router
from skillchat.api.v1.chat import router as chat_router
from skillchat.api.v1.chats import router as chats_router
from skillchat.api.v1.skills import router as skills_router, skill_analysis_validation_handler
from skillchat.core.cors import cors_allow_origin_regex, cors_allowed_origins
from skillchat.core.rate_limit import limiter
from skillchat.core.config import settings
from dotenv import load_dotenv
from skillchat.core.lifespan import lifespan

load_dotenv()
logging.basicConfig(level=settings.log_level, format="%(message)s")
if settings.sentry_dsn:
    sentry_sdk.init(dsn=settings.sentry_dsn)

app = FastAPI(title="SkillChat API", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_allowed_origins(),
    allow_origin_regex=cors_allow_origin_regex(),
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_exception_handler(RequestValidationError, skill_analysis_validation_handler)
app.add_middleware(SlowAPIMiddleware)

app.include_router(health_router, prefix="/v1", tags=["Health"])
app.include_router(chat_router, prefix="/v1", tags=["Chat"])
app.include_router(chats_router, prefix="/v1", tags=["Chats"])
app.include_router(skills_router, prefix="/v1", tags=["Skills"])
