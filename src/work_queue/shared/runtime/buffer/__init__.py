"""
목적: 구독자 이벤트 버퍼 모듈 공개 API를 제공한다.
설명: 구독자 채널, 팬아웃 허브, 전송 결과 모델을 노출한다.
디자인 패턴: 퍼사드
참조: src/work_queue/shared/runtime/buffer/model.py, src/work_queue/shared/runtime/buffer/subscriber_channel.py, src/work_queue/shared/runtime/buffer/fanout.py
"""

from work_queue.shared.runtime.buffer.fanout import EventFanout
from work_queue.shared.runtime.buffer.model import ChannelClosed, ChannelConfig, SendResult
from work_queue.shared.runtime.buffer.subscriber_channel import SubscriberChannel

__all__ = [
    "ChannelClosed",
    "ChannelConfig",
    "SendResult",
    "SubscriberChannel",
    "EventFanout",
]
