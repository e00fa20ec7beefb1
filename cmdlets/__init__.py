"""
cmdlets - AWS API cmdlet 카탈로그

서비스별 폴더의 __init__.py가 SERVICE 메타데이터와 CMDLETS 선언 목록을
정의합니다. core.cmdlet.registry가 이 패키지를 자동으로 스캔합니다.

폴더 구조:
    cmdlets/<service>/__init__.py
        SERVICE = {"name": ..., "display_name": ..., "description": ..., "aliases": [...]}
        CMDLETS = [OperationDescriptor(...), ...]
"""
