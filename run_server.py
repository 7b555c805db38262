"""
Start the invoice tracker API with uvicorn.

Host and port come from HOST / PORT (default 0.0.0.0:5000).
"""

import uvicorn

from invoice_tracker.config import settings

if __name__ == "__main__":
    print("=" * 60)
    print("Starting Invoice Tracker Backend")
    print("=" * 60)
    print()
    print("API Endpoints:")
    print(f"   - Health Check:  GET    http://localhost:{settings.PORT}/health")
    print(f"   - Invoices:      GET    http://localhost:{settings.PORT}/invoices")
    print(f"                    POST   http://localhost:{settings.PORT}/invoices")
    print(f"                    DELETE http://localhost:{settings.PORT}/invoices/<id>")
    print(f"                    PUT    http://localhost:{settings.PORT}/invoices/<id>/done")
    print(f"   - API Docs:             http://localhost:{settings.PORT}/docs")
    print()
    print("Test with curl:")
    print(f'   curl -X POST "http://localhost:{settings.PORT}/invoices" \\')
    print('     -H "Content-Type: application/json" \\')
    print('     -d \'{"invoiceNumber": "INV1", "invoiceDate": "2024-01-01", '
          '"itemName": "Cake", "price": 10, "expiryDate": "2024-01-05"}\'')
    print()
    print("=" * 60)
    print(f"Starting server on http://{settings.HOST}:{settings.PORT}")
    print("Press Ctrl+C to stop")
    print("=" * 60)
    print()

    uvicorn.run(
        "invoice_tracker.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.is_development(),
        log_level=settings.LOG_LEVEL.lower(),
    )
