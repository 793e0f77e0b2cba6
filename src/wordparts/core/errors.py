"""
例外類別

只有「資料本身錯誤」與「呼叫端誤用」會拋出例外；
拆解失敗、辨識錯誤等執行期狀況一律在元件內部降級處理。
"""


class WordPartsError(Exception):
    """wordparts 所有例外的基底類別"""


class LexiconIntegrityError(WordPartsError, ValueError):
    """參考詞庫條目違反長度或串接不變式"""

    def __init__(self, word: str, reason: str):
        self.word = word
        self.reason = reason
        super().__init__(f"Lexicon entry {word!r} is malformed: {reason}")


class DatasetError(WordPartsError, ValueError):
    """資料集 JSON 格式錯誤"""


class RecognitionUnavailableError(WordPartsError, RuntimeError):
    """沒有可用的語音辨識器"""
