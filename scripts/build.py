#!/usr/bin/env python3
"""
Build script for the storefront Lambda functions

Both functions ship the same artifact; they differ only in their handler:
- service.handlers.send_email_handler.lambda_handler
- service.handlers.track_order_handler.lambda_handler
"""
import os
import shutil
import subprocess
import sys
import zipfile
from pathlib import Path

FUNCTIONS = {
    "send_email": "service.handlers.send_email_handler.lambda_handler",
    "track_order": "service.handlers.track_order_handler.lambda_handler",
}


def main():
    """Main build function"""
    project_root = Path(__file__).parent.parent
    build_dir = project_root / "build"
    zip_path = build_dir / "storefront.zip"

    # Create build directory
    build_dir.mkdir(exist_ok=True)

    # Create temporary directory for packaging
    temp_dir = build_dir / "temp_storefront"
    if temp_dir.exists():
        shutil.rmtree(temp_dir)
    temp_dir.mkdir()

    # Install the service package and its dependencies
    print("Installing service package and dependencies...")
    subprocess.run([
        sys.executable, "-m", "pip", "install",
        str(project_root),
        "-t", str(temp_dir),
    ], check=True)

    # Create zip archive
    print("Creating storefront.zip...")
    with zipfile.ZipFile(zip_path, 'w', zipfile.ZIP_DEFLATED) as zipf:
        for root, _, files in os.walk(temp_dir):
            for file in files:
                file_path = Path(root) / file
                arcname = file_path.relative_to(temp_dir)
                zipf.write(file_path, arcname)

    # Clean up temporary directory
    shutil.rmtree(temp_dir)

    print(f"storefront.zip created ({zip_path.stat().st_size} bytes)")
    for function_name, handler in FUNCTIONS.items():
        print(f"  {function_name}: handler={handler}")

    print("Build complete!")


if __name__ == "__main__":
    main()
