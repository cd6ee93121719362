# src/pdf_chunk_extractor/observability/names.py

"""Metric names emitted by pdf-chunk-extractor. Durations are in ms."""

# PDF extraction
PDF_EXTRACTION_DURATION = "pdf_extraction_duration"
PDF_PAGES_TOTAL = "pdf_pages_total"
PDF_OCR_PAGES_TOTAL = "pdf_ocr_pages_total"  # pages with no text layer
PDF_OCR_ERRORS_TOTAL = "pdf_ocr_errors_total"  # pages left empty

# Chunking, labelled with mode=local|ai
CHUNKING_DURATION = "chunking_duration"
CHUNKING_CHUNKS_CREATED = "chunking_chunks_created"
# Blocks formatted locally after the provider failed, labelled with provider
CHUNKING_AI_FALLBACKS_TOTAL = "chunking_ai_fallbacks_total"

# LLM calls
LLM_COMPLETION_DURATION = "llm_completion_duration"
LLM_REQUESTS_TOTAL = "llm_requests_total"
LLM_TOKENS_PROMPT = "llm_tokens_prompt"
LLM_TOKENS_COMPLETION = "llm_tokens_completion"
LLM_TOKENS_TOTAL = "llm_tokens_total"
