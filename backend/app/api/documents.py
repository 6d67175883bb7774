"""Document ingestion endpoints."""

import logging

from fastapi import APIRouter, File, UploadFile
from fastapi.concurrency import run_in_threadpool

from backend.app.schemas.document import BatchItemResult, BatchProcessResponse, DocumentProcessResponse
from backend.app.services import document_ingestion
from backend.app.services.document_ingestion import DocumentProcessingError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/documents", tags=["documents"])


async def _process_upload(upload: UploadFile) -> DocumentProcessResponse:
    content = await upload.read()
    # Extraction and the two model calls block, keep them off the event loop
    processed = await run_in_threadpool(
        document_ingestion.process_document, upload.filename, upload.content_type, content
    )
    return DocumentProcessResponse.model_validate(processed.to_payload())


@router.post("/process", response_model=DocumentProcessResponse)
async def process_document(document: UploadFile = File(...)):
    return await _process_upload(document)


@router.post("/process-batch", response_model=BatchProcessResponse)
async def process_documents(documents: list[UploadFile] = File(...)):
    results = []
    for upload in documents:
        try:
            result = await _process_upload(upload)
        except DocumentProcessingError as exc:
            logger.warning("Skipping %s: %s", upload.filename, exc.message)
            results.append(BatchItemResult(filename=upload.filename, success=False, error=exc.message))
            continue
        results.append(BatchItemResult(filename=upload.filename, success=True, result=result))

    succeeded = sum(1 for r in results if r.success)
    return BatchProcessResponse(succeeded=succeeded, failed=len(results) - succeeded, results=results)
