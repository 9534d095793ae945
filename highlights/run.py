#!/usr/bin/env python3
"""
Development server for the Highlights backend

Usage:
    python -m highlights.run
"""
import os

from highlights.app import create_app


def main():
    """Run the development server"""
    # Set environment for development
    os.environ.setdefault('FLASK_ENV', 'development')

    # Create application
    app = create_app('development')

    # Get configuration
    host = os.environ.get('FLASK_HOST', '0.0.0.0')
    port = int(os.environ.get('FLASK_PORT', 5000))
    debug = os.environ.get('FLASK_DEBUG', 'true').lower() == 'true'

    print(f"""
    Highlights Backend Server
      Environment: Development
      Server:      http://{host}:{port}
      Storage:     {app.extensions['document_store'].backend.value}
      Debug mode:  {'Enabled' if debug else 'Disabled'}
    """)

    # Run development server
    app.run(
        host=host,
        port=port,
        debug=debug,
        use_reloader=True
    )


if __name__ == '__main__':
    main()
