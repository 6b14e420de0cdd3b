from fastapi import FastAPI

from genv_ex import __version__
from genv_ex.template.routes import router as template_router

app = FastAPI(title="genv-ex API", version=__version__)

app.include_router(template_router, prefix="/api/template", tags=["template"])


@app.get("/health")
def health_check():
    return {"status": "ok", "version": __version__}
