"""부동산 계산 엔진

세금, 대출, 임대차, 수수료, 가치평가, 배당 계산기를 제공합니다.
"""

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
