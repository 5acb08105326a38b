"""
App layer: HTTP 서버 (FastAPI).

역할:
- 업로드 라우트, 정적 파일, 헬스 체크
- 설정 로드, 시작 시 폴더 준비
- ⚠️ 저장 로직 없음 (core에 위임)
"""
