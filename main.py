"""
main.py - awc 콘솔 스크립트 진입점

pyproject.toml의 [project.scripts] awc = "main:main" 에서 호출됩니다.
소스 트리에서 직접 실행할 때는 프로젝트 루트를 import 경로에 추가합니다.
"""

try:
    from cli.app import cli
except ModuleNotFoundError:
    import os
    import sys

    sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))
    from cli.app import cli


def main():
    """awc 실행 (프로그램 이름 고정)"""
    cli(prog_name="awc")


if __name__ == "__main__":
    main()
