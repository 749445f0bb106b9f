"""Per-resource managers, keyed by the name passed to `MailChimp.get_manager`."""

from typing import Dict, Type

from .base import BaseManager
from .campaign import CampaignManager
from .campaign_report_data import CampaignReportDataManager
from .campaign_stats import CampaignStatsManager
from .ecommerce import EcommerceManager
from .helper import HelperManager
from .lists import ListsManager

MANAGERS: Dict[str, Type[BaseManager]] = {
    cls.name: cls
    for cls in (
        CampaignManager,
        CampaignStatsManager,
        CampaignReportDataManager,
        EcommerceManager,
        ListsManager,
        HelperManager,
    )
}

__all__ = [
    "MANAGERS",
    "BaseManager",
    "CampaignManager",
    "CampaignReportDataManager",
    "CampaignStatsManager",
    "EcommerceManager",
    "HelperManager",
    "ListsManager",
]
