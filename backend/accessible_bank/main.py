from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from accessible_bank.core.config import settings
from accessible_bank.core.errors import BankError
from accessible_bank.core.logging import configure_logging
from accessible_bank.api.routes.accounts import router as accounts_router
from accessible_bank.api.routes.transactions import router as tx_router
from accessible_bank.api.routes.users import router as users_router

configure_logging(settings.log_level)

app = FastAPI(title="AccessibleBank API")

origins = [o.strip() for o in (settings.cors_origins or "").split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins or ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(BankError)
async def _bank_error(request: Request, exc: BankError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})

@app.get("/health")
@app.get("/api/health")
def health():
    return {"status": "ok"}

app.include_router(users_router)
app.include_router(accounts_router)
app.include_router(tx_router)
