# api.py
import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response

import config
from address_splitter import split_address
from contact_parser import parse_contact
from models.models import ParsedContact, ParseRequest, ParseResponse, SplitAddress, SplitAddressRequest
from vcard import generate_vcard, vcard_filename

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


app = FastAPI(title="Contact Card Parser")
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# -------------------------------
# Endpoints
# -------------------------------
@app.post("/parse", response_model=ParseResponse, response_model_by_alias=True)
async def parse(request: ParseRequest):
    text = request.text
    if not text or not text.strip():
        raise HTTPException(status_code=400, detail="Text is required")
    if config.MAX_TEXT_CHARS and len(text) > config.MAX_TEXT_CHARS:
        raise HTTPException(
            status_code=413,
            detail=f"Text is longer than {config.MAX_TEXT_CHARS} characters",
        )

    try:
        contact = parse_contact(text)
    except Exception as e:
        logger.exception("Parsing failed")
        raise HTTPException(status_code=500, detail=str(e))

    logger.info("Parsed %d chars into %d field(s)", len(text), len(contact.to_dict()))
    return ParseResponse(raw_text=text, contact=contact.to_dict())


@app.post("/split-address", response_model=SplitAddress, response_model_by_alias=True)
async def split(request: SplitAddressRequest):
    return split_address(request.address)


@app.post("/vcard")
async def vcard(contact: ParsedContact):
    try:
        body = generate_vcard(contact)
    except Exception as e:
        logger.exception("vCard export failed")
        raise HTTPException(status_code=500, detail=str(e))

    filename = vcard_filename(contact)
    logger.info("Exported vCard %s", filename)
    return Response(
        content=body,
        media_type="text/vcard",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@app.get("/ping")
async def ping():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.HOST, port=config.PORT)

# uvicorn api:app --reload
# POST /parse
# {
#     "text": "Jane Smith\nChief Marketing Officer\nFlow Power Pty Ltd\ne: jane.smith@flowpower.com.au"
# }
