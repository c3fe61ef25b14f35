"""
IssueHook Application Entry Point.

Starts the inbound webhook server, or sends a one-off test notification
to verify the configured Discord webhook.
"""

import argparse
import logging
import os
import sys
from datetime import datetime

logger = logging.getLogger(__name__)


def setup_logging(log_path: str | None = None) -> None:
    """
    配置日志：标准输出 + 按日期命名的日志文件。

    Args:
        log_path: 日志目录（默认读取 LOG_PATH 环境变量，否则为 logs）
    """
    log_path = log_path or os.getenv('LOG_PATH', 'logs')
    os.makedirs(log_path, exist_ok=True)

    today = datetime.now().strftime('%Y-%m-%d')
    log_file = os.path.join(log_path, f'issuehook_{today}.log')

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(log_file, encoding='utf-8'),
            logging.StreamHandler(sys.stdout)
        ]
    )


def log_discord_status() -> None:
    """记录 Discord Webhook 配置状态"""
    from issuehook.core.config import config

    if config.discord.enabled and config.discord.webhook_url:
        logger.info('🔔 Discord 通知已启用')
    elif not config.discord.enabled:
        logger.info('🔕 Discord 通知已禁用')
    else:
        logger.warning('⚠️ Discord 已启用但未配置 Webhook URL')


def start_webhook_server(host: str, port: int):
    """
    启动 Webhook 服务器。

    Args:
        host: 监听地址
        port: 监听端口
    """
    from flask import Flask
    from issuehook.interface.webhook.handler import create_webhook_blueprint

    app = Flask(__name__)
    app.register_blueprint(create_webhook_blueprint())

    # 使用 Werkzeug 静默模式
    logging.getLogger('werkzeug').setLevel(logging.WARNING)

    app.run(host=host, port=port, debug=False, use_reloader=False)


def handle_test_command(args) -> bool:
    """
    发送一条测试通知。

    Returns:
        是否发送成功
    """
    from issuehook.container import container
    from issuehook.core.interfaces.notifications import IssueActor, IssueNotification

    notification = IssueNotification(
        issue_id=args.issue_id,
        description=args.description,
        project=args.project,
        actor=IssueActor(name=args.actor) if args.actor else None
    )

    response = container.issue_notifier().notify_created(notification)
    if response.skipped:
        logger.warning('🔕 Discord 通知已禁用，测试通知未发送')
        return False
    if response.success:
        logger.info('✅ 测试通知发送成功')
    else:
        logger.error(f'❌ 测试通知发送失败: {response.error_message}')
    return response.success


def main():
    """主程序入口"""
    parser = argparse.ArgumentParser(description='IssueHook - Issue 事件 Discord 通知')
    parser.add_argument('--debug', action='store_true', help='启用debug模式')
    subparsers = parser.add_subparsers(dest='command', help='可用命令')

    # 测试通知命令
    test_parser = subparsers.add_parser('test', help='发送测试通知')
    test_parser.add_argument('issue_id', help='Issue ID')
    test_parser.add_argument('--description', default='IssueHook 测试消息', help='描述')
    test_parser.add_argument('--project', default=None, help='项目名称')
    test_parser.add_argument('--actor', default=None, help='操作者名称')

    args = parser.parse_args()

    setup_logging()

    if args.debug:
        logger.info('🐛 DEBUG模式已启用')
        logging.getLogger().setLevel(logging.DEBUG)

    from issuehook.core.config import config

    logger.info('🚀 IssueHook 启动中...')
    logger.info(f'📁 配置文件路径: {os.getenv("CONFIG_PATH", "config.json")}')

    log_discord_status()

    if args.command == 'test':
        sys.exit(0 if handle_test_command(args) else 1)

    logger.info(f'📍 Webhook 地址: http://{config.webhook.host}:{config.webhook.port}')
    try:
        start_webhook_server(config.webhook.host, config.webhook.port)
    except KeyboardInterrupt:
        logger.info('🛑 接收到停止信号，正在退出...')


if __name__ == '__main__':
    main()
