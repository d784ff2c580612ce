"""CLI 命令列工具

提供資料庫初始化與天氣查詢等命令列功能。
"""

import asyncio
from typing import Optional

import click

from shoptar.database import init_db
from shoptar.schemas.weather import AccuLocationWeatherResultDto
from shoptar.services.weather import WeatherForecastServices


@click.group()
def cli():
    """ShopTAR CLI 工具"""
    pass


@cli.command()
def init_database():
    """初始化資料庫表"""
    click.echo("正在初始化資料庫...")
    init_db()
    click.echo("資料庫初始化完成！")


@cli.command()
@click.argument("location_key", required=False)
@click.option("--city", help="以城市名稱搜尋地點")
def weather(location_key: Optional[str], city: Optional[str]):
    """查詢目前天氣"""
    service = WeatherForecastServices()
    dto = AccuLocationWeatherResultDto(location_key=location_key, city_name=city)

    if city:
        result = asyncio.run(service.search_city(dto))
    else:
        result = asyncio.run(service.accu_weather_result(dto))

    click.echo(f"地點代碼: {result.location_key}")
    if result.city_name:
        click.echo(f"  城市: {result.city_name}")
    click.echo(f"  觀測時間: {result.local_observation_date_time}")
    click.echo(f"  天氣: {result.text}")
    click.echo(f"  溫度: {result.temp_metric_value_unit}°C")


if __name__ == "__main__":
    cli()
