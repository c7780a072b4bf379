import logging

from aiogram import Bot, Router
from aiogram.exceptions import TelegramAPIError, TelegramBadRequest
from aiogram.filters import Command, CommandObject
from aiogram.types import (
    CallbackQuery,
    InaccessibleMessage,
    InlineQuery,
    InlineQueryResultArticle,
    InputTextMessageContent,
    Message,
)

from bot.keyboards.common import build_keyboard
from bot.navigation import COMMANDS, NavigationController
from bot.views import InlineResult, RenderedPage, TextArticle

logger = logging.getLogger(__name__)


def _is_not_modified_error(error: Exception) -> bool:
    return "message is not modified" in str(error).lower()


def _is_stale_query_error(error: Exception) -> bool:
    message = str(error).lower()
    return "query is too old" in message or "query id is invalid" in message


async def _safe_answer_callback(query: CallbackQuery, *args, **kwargs) -> None:
    try:
        await query.answer(*args, **kwargs)
    except TelegramAPIError as exc:
        if _is_stale_query_error(exc):
            logger.info("Callback query expired before it was answered", extra={"callback_data": query.data})
            return
        logger.warning(
            "Failed to answer callback query",
            extra={"op": "answer_callback", "callback_data": query.data, "reason": str(exc)},
        )


async def _send_page(message: Message, page: RenderedPage, parse_mode: str) -> None:
    try:
        await message.answer(page.text, reply_markup=build_keyboard(page), parse_mode=parse_mode)
    except TelegramAPIError as exc:
        logger.warning(
            "Failed to send message",
            extra={"op": "send_message", "chat_id": message.chat.id, "reason": str(exc)},
        )


async def _edit_page(message: Message, page: RenderedPage, parse_mode: str) -> None:
    try:
        await message.edit_text(page.text, reply_markup=build_keyboard(page), parse_mode=parse_mode)
    except TelegramBadRequest as exc:
        if _is_not_modified_error(exc):
            logger.debug("Edit skipped, message unchanged", extra={"chat_id": message.chat.id})
            return
        logger.warning(
            "Failed to edit message",
            extra={"op": "edit_message", "chat_id": message.chat.id, "reason": str(exc)},
        )
    except TelegramAPIError as exc:
        logger.warning(
            "Failed to edit message",
            extra={"op": "edit_message", "chat_id": message.chat.id, "reason": str(exc)},
        )


async def _edit_inline_page(
    bot: Bot, inline_message_id: str, page: RenderedPage, parse_mode: str
) -> None:
    try:
        await bot.edit_message_text(
            text=page.text,
            inline_message_id=inline_message_id,
            reply_markup=build_keyboard(page),
            parse_mode=parse_mode,
        )
    except TelegramBadRequest as exc:
        if _is_not_modified_error(exc):
            return
        logger.warning(
            "Failed to edit inline message",
            extra={"op": "edit_inline_message", "reason": str(exc)},
        )
    except TelegramAPIError as exc:
        logger.warning(
            "Failed to edit inline message",
            extra={"op": "edit_inline_message", "reason": str(exc)},
        )


async def _safe_delete_message(bot: Bot, message: Message) -> None:
    chat_id = message.chat.id
    message_id = message.message_id
    try:
        await bot.delete_message(chat_id=chat_id, message_id=message_id)
    except TelegramAPIError as exc:
        logger.warning(
            "Failed to delete message",
            extra={
                "op": "delete_message",
                "chat_id": chat_id,
                "message_id": message_id,
                "reason": str(exc),
            },
        )


async def on_command(
    message: Message, command: CommandObject, controller: NavigationController
) -> None:
    user_id = message.from_user.id if message.from_user else None
    logger.info("Command received", extra={"command": command.command, "user_id": user_id})
    page = controller.handle_command(command.command, command.args or "")
    if page is None:
        return
    await _send_page(message, page, controller.parse_mode)


async def on_callback(
    query: CallbackQuery,
    bot: Bot,
    controller: NavigationController,
    tidy_chat: bool = False,
) -> None:
    # Acknowledge first so the client spinner stops whatever happens next.
    await _safe_answer_callback(query)
    logger.info(
        "Callback received",
        extra={"callback_data": query.data, "user_id": query.from_user.id if query.from_user else None},
    )

    page = controller.handle_token(query.data or "")
    if page is None:
        return

    if query.inline_message_id:
        if not page.replace:
            logger.debug("No chat to post into for inline message", extra={"callback_data": query.data})
            return
        await _edit_inline_page(bot, query.inline_message_id, page, controller.parse_mode)
        return

    message = query.message
    if message is None or isinstance(message, InaccessibleMessage):
        logger.info("Callback message is no longer accessible", extra={"callback_data": query.data})
        return

    if not page.replace:
        await _send_page(message, page, controller.parse_mode)
        return
    if tidy_chat:
        await _safe_delete_message(bot, message)
        await _send_page(message, page, controller.parse_mode)
        return
    await _edit_page(message, page, controller.parse_mode)


def _to_article(result: InlineResult, parse_mode: str) -> InlineQueryResultArticle:
    if isinstance(result, TextArticle):
        return InlineQueryResultArticle(
            id=result.id,
            title=result.title,
            description=result.description,
            input_message_content=InputTextMessageContent(
                message_text=result.page.text, parse_mode=parse_mode
            ),
            reply_markup=build_keyboard(result.page),
        )
    return InlineQueryResultArticle(
        id=result.id,
        title=result.title,
        description=result.description,
        input_message_content=InputTextMessageContent(message_text=result.text, parse_mode=parse_mode),
    )


async def on_inline_query(inline_query: InlineQuery, controller: NavigationController) -> None:
    answer = controller.inline_answer(inline_query.query, inline_query.offset)
    results = [_to_article(result, controller.parse_mode) for result in answer.results]
    try:
        await inline_query.answer(
            results,
            cache_time=answer.cache_time,
            next_offset=answer.next_offset,
        )
    except TelegramAPIError as exc:
        logger.warning(
            "Failed to answer inline query",
            extra={"op": "answer_inline_query", "query": inline_query.query, "reason": str(exc)},
        )


def create_router() -> Router:
    router = Router(name="navigation")
    router.message.register(on_command, Command(*COMMANDS))
    router.callback_query.register(on_callback)
    router.inline_query.register(on_inline_query)
    return router


__all__ = ["create_router", "on_callback", "on_command", "on_inline_query"]
