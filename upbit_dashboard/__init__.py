"""
upbit_dashboard
~~~~~~~~~~~~~~~

업비트 코인 지표 대시보드:
- 업비트 공개 API 에서 KRW 마켓 목록과 일 캔들 조회
- 코인별 RSI(14) 및 전일 대비 가격 변동 계산
- 정렬 가능한 HTML 대시보드 / JSON 피드 제공

서버 실행 스크립트는 저장소 루트에 위치:
- scripts/run_dashboard.py
"""
