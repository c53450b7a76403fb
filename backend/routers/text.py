"""Text tools API endpoints"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query

from models.diff import DiffRequest, DiffResult
from models.regex import RegexRequest, RegexResult
from models.text import (
    CaseConvertRequest,
    EncodeRequest,
    EncodeResult,
    LoremType,
    MarkdownRequest,
    MarkdownResult,
    TextResult,
)
from services.config_manager import ConfigManager
from services.diff_engine import DiffEngine
from services.markdown_preview import render_markdown
from services.regex_tester import run_pattern
from services.text_tools import (
    TextToolError,
    convert_case,
    decode_base64,
    encode_base64,
    generate_lorem_ipsum,
)

logger = logging.getLogger(__name__)

router = APIRouter()
diff_engine = DiffEngine()


@router.post("/case-converter", response_model=TextResult)
async def case_converter(request: CaseConvertRequest) -> TextResult:
    """Convert text to upper, lower or title case"""
    try:
        return TextResult(result=convert_case(request.text, request.case_type))
    except Exception:
        logger.exception("Case conversion failed")
        raise HTTPException(status_code=500, detail="Failed to convert text case")


@router.post("/diff", response_model=DiffResult, response_model_exclude_none=True)
async def text_diff(request: DiffRequest) -> DiffResult:
    """Compare two texts at line, word or character granularity"""
    mode = request.mode or ConfigManager.get_instance().get_text_settings().default_diff_mode

    try:
        return diff_engine.compute_diff(request.text1, request.text2, mode)
    except Exception:
        logger.exception("Text diff failed")
        raise HTTPException(status_code=500, detail="Failed to compare texts")


@router.post("/encode", response_model=EncodeResult, response_model_exclude_none=True)
async def encode(request: EncodeRequest) -> EncodeResult:
    """Base64 encode or decode text"""
    if request.decode:
        try:
            return EncodeResult(decoded=decode_base64(request.text))
        except TextToolError as e:
            raise HTTPException(status_code=400, detail=str(e))
    return EncodeResult(encoded=encode_base64(request.text))


@router.post("/regex", response_model=RegexResult)
async def regex_tester(request: RegexRequest) -> RegexResult:
    """Run a pattern against a text and explain the pattern"""
    flags = request.flags
    if flags is None:
        flags = ConfigManager.get_instance().get_text_settings().default_regex_flags

    try:
        return run_pattern(request.text, request.pattern, flags)
    except Exception:
        logger.exception("Regex test failed")
        raise HTTPException(status_code=500, detail="Failed to test regex pattern")


@router.get("/lorem-ipsum", response_model=TextResult)
async def lorem_ipsum(
    count: int | None = Query(default=None),
    kind: LoremType = Query(default=LoremType.PARAGRAPHS, alias="type"),
) -> TextResult:
    """Generate placeholder words or paragraphs"""
    max_paragraphs = ConfigManager.get_instance().get_text_settings().max_lorem_paragraphs
    try:
        return TextResult(result=generate_lorem_ipsum(count or 1, kind, max_paragraphs))
    except Exception:
        logger.exception("Lorem ipsum generation failed")
        raise HTTPException(status_code=500, detail="Failed to generate Lorem Ipsum text")


@router.post("/markdown", response_model=MarkdownResult)
async def markdown_preview(request: MarkdownRequest) -> MarkdownResult:
    """Render markdown to sanitized HTML"""
    try:
        return MarkdownResult(html=render_markdown(request.markdown))
    except Exception:
        logger.exception("Markdown preview failed")
        raise HTTPException(status_code=500, detail="Failed to preview markdown")
