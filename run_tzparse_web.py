#!/usr/bin/env python3
"""
tzparse - Web Interface Entry Point

Run this script to start the JSON API:
    python3 run_tzparse_web.py

Then open your browser to: http://127.0.0.1:8488/api/zoneinfo?zone=Europe/Paris
"""

from flask_app import create_app
import os

app = create_app(os.getenv('FLASK_CONFIG', 'development'))

if __name__ == '__main__':
    # Get port from environment variable or use default
    port = int(os.getenv('PORT', 8488))

    print("\n" + "="*60)
    print("tzparse JSON API")
    print("="*60)
    print(f"\nOpen browser to: http://127.0.0.1:{port}/api/zoneinfo")
    print("\nPress CTRL+C to stop the server\n")

    app.run(debug=app.config.get('DEBUG', False), host='0.0.0.0', port=port)
