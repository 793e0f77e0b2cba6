"""
元件基底類別

拆解引擎、口說比對器、朗讀器都是有狀態元件，共用同一套
配置、日誌、計時與事件發送方式。
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

from wordparts.config import DEFAULT_CONFIG, TrainerConfig, configure_logging
from wordparts.utils.logger import TimingContext, get_logger


class LoggingComponent:
    """
    有狀態元件基底

    子類別在 __init__ 開頭呼叫 _setup_component()，之後可使用:
    - self._config: 練習配置，未指定時為 DEFAULT_CONFIG
    - self._logger: "wordparts.<_component_name>" logger
    - self._log_timing(op): 計時 context，耗時同時回報給 on_timing
    - self._emit(event): 呼叫 on_event；回呼的例外只記錄不外拋
    """

    _component_name: str = "component"

    def _setup_component(
        self,
        config: Optional[TrainerConfig] = None,
        *,
        on_event: Optional[Callable[[Any], None]] = None,
        verbose: bool = False,
        on_timing: Optional[Callable[[str, float], None]] = None,
    ) -> None:
        self._config = config or DEFAULT_CONFIG
        self._on_event = on_event
        self._on_timing = on_timing

        # 參數或 config 任一開啟 verbose 都輸出 DEBUG
        configure_logging(verbose or self._config.verbose)
        self._logger = get_logger(self._component_name)

    def _log_timing(self, operation: str) -> TimingContext:
        return TimingContext(operation, self._logger, logging.DEBUG, self._on_timing)

    def _event_context(self) -> Dict[str, Any]:
        """每個事件都會帶上的欄位；子類別覆寫"""
        return {}

    def _emit(self, event: Dict[str, Any]) -> None:
        if self._on_event is None:
            return
        event.update(self._event_context())
        try:
            self._on_event(event)
        except Exception:
            self._logger.exception(f"{type(self).__name__} on_event 回呼執行失敗")
