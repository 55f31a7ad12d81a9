from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from yeuai.api.routes import router as api_router
from starlette.responses import Response
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
app = FastAPI(
    title="yeu.ai phrase parser",
    version="0.1.0",
    description="Groups Vietnamese POS/NER tags into noun, verb, adjective, adverb, pronoun and entity phrases.",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/metrics")
def metrics():
    data = generate_latest()  # default registry
    return Response(content=data, media_type=CONTENT_TYPE_LATEST)
app.include_router(api_router, prefix="/api")
