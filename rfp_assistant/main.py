import logging

from fastapi import FastAPI
from rfp_assistant.api.endpoints import conversations
from rfp_assistant.api.endpoints import drafts


from fastapi.middleware.cors import CORSMiddleware
from rfp_assistant.core.config import Settings

settings = Settings()
logging.basicConfig(level=settings.log_level.upper())

app = FastAPI(title="RFP Draft Assistant")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(conversations.router, prefix="/conversations", tags=["conversations"])
app.include_router(drafts.router, tags=["drafts"])
