# cli/ui - 콘솔 출력 컴포넌트 (rich)
"""
콘솔 UI 모듈

CLI 전용 UI 컴포넌트들 (콘솔 출력, 로깅 설정, cmdlet 검색)
"""

from .console import (
    SYMBOL_ERROR,
    SYMBOL_WARNING,
    configure_logging,
    console,
    err_console,
    get_console,
    print_error,
    print_warning,
)
from .search import CmdletSearchEngine, SearchResult, get_search_engine

__all__ = [
    "SYMBOL_ERROR",
    "SYMBOL_WARNING",
    "configure_logging",
    "console",
    "err_console",
    "get_console",
    "print_error",
    "print_warning",
    "CmdletSearchEngine",
    "SearchResult",
    "get_search_engine",
]
