"""
Run the Career Compass backend locally with uvicorn.
"""

import os

import uvicorn

if __name__ == "__main__":
    port = int(os.getenv("PORT", "8000"))

    print("=" * 60)
    print("Starting Career Compass Backend")
    print("=" * 60)
    print()
    print("📌 API Endpoints:")
    print(f"   - Health Check:  GET  http://localhost:{port}/health")
    print(f"   - Guidance:      POST http://localhost:{port}/api/guidance")
    print(f"   - API Docs:           http://localhost:{port}/docs")
    print()
    print("📝 Test with curl:")
    print(f'   curl -X POST "http://localhost:{port}/api/guidance" \\')
    print('     -H "Content-Type: application/json" \\')
    print('     -d \'{"action": "recommendations", "userData": {"academics": {"stream": "Arts", "marks": 72}, '
          '"skills": {"writing": true}, "interests": {"primary": "Law"}, "location": {"state": "Delhi"}}}\'')
    print()
    print("=" * 60)

    uvicorn.run(
        "career_compass.main:app",
        host="0.0.0.0",
        port=port,
        reload=os.getenv("ENVIRONMENT", "development") == "development",
        log_level="info"
    )
