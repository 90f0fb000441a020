#!/usr/bin/env python3
"""
FastAPI(아이디어 생성 API) + Streamlit(입력 폼/결과 화면)을 한 번에 띄우는 실행 스크립트.

실행:
  python run.py

환경변수:
  API_HOST / API_PORT : FastAPI 주소 (기본 127.0.0.1:8000)
  ANTHROPIC_API_KEY / OPENAI_API_KEY : 없으면 로컬 fallback 아이디어
"""

import os
import signal
import socket
import subprocess
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent
FRONTEND_APP = PROJECT_ROOT / "frontend" / "app.py"

API_HOST = os.getenv("API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("API_PORT", "8000"))

processes: list[subprocess.Popen] = []


def pick_free_port(start: int = 8501, end: int = 8510, host: str = "127.0.0.1") -> int:
    """start~end 중 사용 가능한 첫 포트"""
    for port in range(start, end + 1):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            try:
                s.bind((host, port))
                return port
            except OSError:
                continue
    return start


def shutdown(*_):
    print("\n🛑 Shutting down...")
    for p in processes:
        if p.poll() is None:
            p.terminate()
    for p in processes:
        try:
            p.wait(timeout=5)
        except subprocess.TimeoutExpired:
            p.kill()
    print("✅ Done")
    sys.exit(0)


def main():
    signal.signal(signal.SIGINT, shutdown)
    signal.signal(signal.SIGTERM, shutdown)

    # (1) FastAPI
    api_cmd = [
        sys.executable, "-m", "uvicorn",
        "backend.app.main:app",
        "--host", API_HOST,
        "--port", str(API_PORT),
        "--reload",
    ]
    print("🚀 Starting FastAPI:", " ".join(api_cmd))
    processes.append(subprocess.Popen(api_cmd, cwd=str(PROJECT_ROOT)))

    # (2) Streamlit -> 위 FastAPI 주소를 API_BASE로 넘겨줌
    st_port = pick_free_port(start=8501, end=8510, host="127.0.0.1")
    st_cmd = [
        sys.executable, "-m", "streamlit",
        "run", str(FRONTEND_APP),
        "--server.port", str(st_port),
        "--server.address", "127.0.0.1",
    ]
    st_env = dict(os.environ, API_BASE=f"http://{API_HOST}:{API_PORT}")
    print(f"✅ Streamlit port: {st_port}")
    print("🚀 Starting Streamlit:", " ".join(st_cmd))
    processes.append(subprocess.Popen(st_cmd, cwd=str(PROJECT_ROOT), env=st_env))

    for p in processes:
        p.wait()


if __name__ == "__main__":
    main()
