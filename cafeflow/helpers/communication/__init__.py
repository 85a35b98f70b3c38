from cafeflow.helpers.communication.mail import EmailHelper
from cafeflow.helpers.communication.telegram import TelegramHelper

__all__ = ['EmailHelper', 'TelegramHelper']
