# backend/resume_ats/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import CORS_ORIGINS, LOG_LEVEL
from .routes import ats_routes, interview_routes, suggestion_routes

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

app = FastAPI(title="Resume ATS Backend")

# ----------------- CORS -----------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# include routers
app.include_router(ats_routes.router)
app.include_router(interview_routes.router)
app.include_router(suggestion_routes.router)

@app.get("/")
def root():
    return {"message": "Resume ATS backend running. Open /docs for API."}
