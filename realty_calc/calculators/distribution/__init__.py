"""배당·상속분 계산기"""

from .auction_distribution import calculate_auction_distribution
from .inheritance_share import calculate_inheritance_share

__all__ = [
    'calculate_auction_distribution',
    'calculate_inheritance_share',
]
