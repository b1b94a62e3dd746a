"""부동산 계산기 HTTP API"""
