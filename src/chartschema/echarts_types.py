"""
ECharts option types

A typed description of the ECharts option objects the schema generator
compiles. Only the option surface the chart commands actually use is
described; anything else is left open as ``Any``.
"""

from typing import Annotated, Any, Callable, Dict, List, Literal, Optional, TypedDict, Union

Color = Annotated[str, "CSS color, e.g. '#5470c6' or 'rgba(0,0,0,0.5)'"]
Position = Union[int, float, str]
Formatter = Union[str, Callable[..., str]]
SymbolShape = Literal["circle", "rect", "roundRect", "triangle", "diamond", "pin", "arrow", "none"]
NumberPair = List[Union[int, float, str]]


# Shared styles

class TextStyleOption(TypedDict, total=False):
    color: Color
    fontStyle: Literal["normal", "italic", "oblique"]
    fontWeight: Union[Literal["normal", "bold", "bolder", "lighter"], int]
    fontFamily: str
    fontSize: Union[int, float]
    lineHeight: Union[int, float]
    align: Literal["left", "center", "right"]
    verticalAlign: Literal["top", "middle", "bottom"]


class LineStyleOption(TypedDict, total=False):
    color: Color
    width: Union[int, float]
    type: Union[Literal["solid", "dashed", "dotted"], int, List[int]]
    opacity: Annotated[float, "Opacity from 0 to 1"]
    cap: Literal["butt", "round", "square"]
    shadowBlur: Union[int, float]
    shadowColor: Color


class ItemStyleOption(TypedDict, total=False):
    color: Union[Color, Callable[..., str]]
    borderColor: Color
    borderWidth: Union[int, float]
    borderType: Literal["solid", "dashed", "dotted"]
    borderRadius: Union[int, float, List[Union[int, float]]]
    opacity: Annotated[float, "Opacity from 0 to 1"]
    shadowBlur: Union[int, float]
    shadowColor: Color


class AreaStyleOption(TypedDict, total=False):
    color: Union[Color, List[Color]]
    origin: Union[Literal["auto", "start", "end"], int, float]
    opacity: Annotated[float, "Opacity from 0 to 1"]


class LabelOption(TypedDict, total=False):
    show: Annotated[bool, "Whether to show the label"]
    position: Union[Literal["top", "left", "right", "bottom", "inside", "insideTop",
                            "insideLeft", "insideRight", "insideBottom", "outside"],
                    List[Union[int, float, str]]]
    distance: Union[int, float]
    rotate: Union[int, float]
    formatter: Annotated[Formatter, "Template string such as '{b}: {c}' or a callback"]
    color: Color
    fontSize: Union[int, float]
    fontWeight: Union[Literal["normal", "bold"], int]


class EmphasisOption(TypedDict, total=False):
    disabled: bool
    focus: Literal["none", "self", "series", "ancestor", "descendant", "adjacency"]
    scale: Union[bool, int, float]
    label: LabelOption
    itemStyle: ItemStyleOption
    lineStyle: LineStyleOption
    areaStyle: AreaStyleOption


class MarkPointOption(TypedDict, total=False):
    symbol: SymbolShape
    symbolSize: Union[int, float, List[Union[int, float]]]
    label: LabelOption
    itemStyle: ItemStyleOption
    data: List[Dict[str, Any]]


class MarkLineOption(TypedDict, total=False):
    silent: bool
    symbol: Union[SymbolShape, List[SymbolShape]]
    label: LabelOption
    lineStyle: LineStyleOption
    data: List[Any]


# Data items

DataValue = Union[int, float, str, None]


class DataItemOption(TypedDict, total=False):
    name: str
    value: Union[DataValue, List[DataValue]]
    itemStyle: ItemStyleOption
    label: LabelOption


class TreemapDataItem(TypedDict, total=False):
    name: str
    value: Union[int, float, List[Union[int, float]]]
    itemStyle: ItemStyleOption
    children: Annotated[List["TreemapDataItem"], "Nested nodes of the same shape"]


class SankeyNodeItem(TypedDict, total=False):
    name: str
    value: Union[int, float]
    depth: int
    itemStyle: ItemStyleOption
    label: LabelOption


class SankeyLinkItem(TypedDict, total=False):
    source: Union[str, int]
    target: Union[str, int]
    value: Union[int, float]
    lineStyle: LineStyleOption


SeriesData = List[Union[DataValue, List[DataValue], DataItemOption]]


# Series

class SeriesBase(TypedDict, total=False):
    id: str
    name: Annotated[str, "Series name, used by tooltip and legend"]
    zlevel: int
    z: int
    silent: bool
    animation: bool
    animationDuration: Union[int, float, Callable[..., float]]
    tooltip: Dict[str, Any]
    emphasis: EmphasisOption
    datasetIndex: int
    encode: Dict[str, Union[str, int, List[Union[str, int]]]]


class CartesianSeriesBase(SeriesBase, total=False):
    coordinateSystem: Literal["cartesian2d", "polar"]
    xAxisIndex: int
    yAxisIndex: int
    markPoint: MarkPointOption
    markLine: MarkLineOption


class BarSeriesOption(CartesianSeriesBase, total=False):
    type: Literal["bar"]
    data: SeriesData
    stack: Annotated[str, "Series with the same stack name are stacked"]
    barWidth: Union[int, float, str]
    barMaxWidth: Union[int, float, str]
    barGap: str
    barCategoryGap: str
    showBackground: bool
    backgroundStyle: ItemStyleOption
    label: LabelOption
    itemStyle: ItemStyleOption
    realtimeSort: bool


class LineSeriesOption(CartesianSeriesBase, total=False):
    type: Literal["line"]
    data: SeriesData
    stack: str
    smooth: Annotated[Union[bool, float], "true or a smoothness between 0 and 1"]
    step: Union[bool, Literal["start", "middle", "end"]]
    symbol: SymbolShape
    symbolSize: Union[int, float, List[Union[int, float]]]
    showSymbol: bool
    connectNulls: bool
    label: LabelOption
    lineStyle: LineStyleOption
    areaStyle: AreaStyleOption
    itemStyle: ItemStyleOption


class PieSeriesOption(SeriesBase, total=False):
    type: Literal["pie"]
    data: List[Union[DataValue, DataItemOption]]
    center: NumberPair
    radius: Annotated[Union[Position, NumberPair], "Outer radius, or [inner, outer] for a donut"]
    roseType: Union[bool, Literal["radius", "area"]]
    startAngle: Union[int, float]
    clockwise: bool
    avoidLabelOverlap: bool
    label: LabelOption
    labelLine: Dict[str, Any]
    itemStyle: ItemStyleOption


class ScatterSeriesOption(CartesianSeriesBase, total=False):
    type: Literal["scatter", "effectScatter"]
    data: SeriesData
    symbol: SymbolShape
    symbolSize: Union[int, float, List[Union[int, float]], Callable[..., float]]
    large: bool
    label: LabelOption
    itemStyle: ItemStyleOption


class RadarSeriesOption(SeriesBase, total=False):
    type: Literal["radar"]
    radarIndex: int
    data: List[DataItemOption]
    symbol: SymbolShape
    symbolSize: Union[int, float]
    label: LabelOption
    lineStyle: LineStyleOption
    areaStyle: AreaStyleOption
    itemStyle: ItemStyleOption


class FunnelSeriesOption(SeriesBase, total=False):
    type: Literal["funnel"]
    data: List[Union[DataValue, DataItemOption]]
    min: Union[int, float]
    max: Union[int, float]
    minSize: Union[int, float, str]
    maxSize: Union[int, float, str]
    sort: Union[Literal["ascending", "descending", "none"], Callable[..., int]]
    gap: Union[int, float]
    funnelAlign: Literal["left", "center", "right"]
    label: LabelOption
    itemStyle: ItemStyleOption


class GaugeSeriesOption(SeriesBase, total=False):
    type: Literal["gauge"]
    data: List[Union[DataValue, DataItemOption]]
    min: Union[int, float]
    max: Union[int, float]
    startAngle: Union[int, float]
    endAngle: Union[int, float]
    splitNumber: int
    radius: Position
    progress: Dict[str, Any]
    pointer: Dict[str, Any]
    axisLine: Dict[str, Any]
    detail: LabelOption
    title: LabelOption


class TreemapSeriesOption(SeriesBase, total=False):
    type: Literal["treemap"]
    data: List[TreemapDataItem]
    leafDepth: Optional[int]
    roam: Union[bool, Literal["scale", "move"]]
    nodeClick: Union[bool, Literal["zoomToNode", "link"]]
    breadcrumb: Dict[str, Any]
    levels: List[Dict[str, Any]]
    label: LabelOption
    upperLabel: LabelOption
    itemStyle: ItemStyleOption


class BoxplotSeriesOption(CartesianSeriesBase, total=False):
    type: Literal["boxplot"]
    data: Annotated[List[List[Union[int, float]]], "Rows of [min, Q1, median, Q3, max]"]
    layout: Literal["horizontal", "vertical"]
    boxWidth: NumberPair
    itemStyle: ItemStyleOption


class HeatmapSeriesOption(CartesianSeriesBase, total=False):
    type: Literal["heatmap"]
    data: Annotated[List[List[Union[int, float, str]]], "Rows of [x, y, value]"]
    pointSize: Union[int, float]
    blurSize: Union[int, float]
    label: LabelOption
    itemStyle: ItemStyleOption


class CandlestickSeriesOption(CartesianSeriesBase, total=False):
    type: Literal["candlestick", "k"]
    data: Annotated[List[List[Union[int, float]]], "Rows of [open, close, lowest, highest]"]
    layout: Literal["horizontal", "vertical"]
    barWidth: Union[int, float, str]
    barMaxWidth: Union[int, float, str]
    itemStyle: ItemStyleOption


class SankeySeriesOption(SeriesBase, total=False):
    type: Literal["sankey"]
    data: List[SankeyNodeItem]
    nodes: List[SankeyNodeItem]
    links: List[SankeyLinkItem]
    edges: List[SankeyLinkItem]
    orient: Literal["horizontal", "vertical"]
    nodeWidth: Union[int, float]
    nodeGap: Union[int, float]
    nodeAlign: Literal["justify", "left", "right"]
    draggable: bool
    label: LabelOption
    lineStyle: LineStyleOption
    itemStyle: ItemStyleOption


# Components

class BoxLayoutOption(TypedDict, total=False):
    left: Position
    top: Position
    right: Position
    bottom: Position
    width: Position
    height: Position


class TitleComponentOption(BoxLayoutOption, total=False):
    show: bool
    text: Annotated[str, "Main title text, '\\n' for line breaks"]
    subtext: str
    link: str
    textStyle: TextStyleOption
    subtextStyle: TextStyleOption
    textAlign: Literal["auto", "left", "right", "center"]
    itemGap: Union[int, float]


class TooltipComponentOption(TypedDict, total=False):
    show: bool
    trigger: Literal["item", "axis", "none"]
    triggerOn: Literal["mousemove", "click", "mousemove|click", "none"]
    axisPointer: Dict[str, Any]
    formatter: Formatter
    valueFormatter: Callable[..., str]
    backgroundColor: Color
    borderColor: Color
    textStyle: TextStyleOption
    confine: bool


class GridComponentOption(BoxLayoutOption, total=False):
    id: str
    show: bool
    containLabel: Annotated[bool, "Whether the grid region contains axis tick labels"]
    backgroundColor: Color
    borderColor: Color


class AxisLabelOption(LabelOption, total=False):
    interval: Union[Literal["auto"], int, Callable[..., bool]]
    inside: bool
    margin: Union[int, float]


class AxisOption(TypedDict, total=False):
    id: str
    show: bool
    type: Literal["value", "category", "time", "log"]
    name: str
    nameLocation: Literal["start", "middle", "center", "end"]
    nameTextStyle: TextStyleOption
    gridIndex: int
    inverse: bool
    boundaryGap: Union[bool, List[Union[int, float, str]]]
    min: Union[int, float, str, Callable[..., float]]
    max: Union[int, float, str, Callable[..., float]]
    scale: bool
    splitNumber: int
    data: List[Union[str, int, float, DataItemOption]]
    axisLabel: AxisLabelOption
    axisLine: Dict[str, Any]
    axisTick: Dict[str, Any]
    splitLine: Dict[str, Any]


class XAxisComponentOption(AxisOption, total=False):
    position: Literal["top", "bottom"]


class YAxisComponentOption(AxisOption, total=False):
    position: Literal["left", "right"]


class LegendBase(BoxLayoutOption, total=False):
    show: bool
    orient: Literal["horizontal", "vertical"]
    data: Annotated[List[Union[str, DataItemOption]], "Legend entries, defaults to series names"]
    selectedMode: Union[bool, Literal["single", "multiple"]]
    selected: Dict[str, bool]
    itemGap: Union[int, float]
    itemWidth: Union[int, float]
    itemHeight: Union[int, float]
    textStyle: TextStyleOption
    icon: str


class PlainLegendOption(LegendBase, total=False):
    type: Literal["plain"]


class ScrollableLegendOption(LegendBase, total=False):
    type: Literal["scroll"]
    scrollDataIndex: int
    pageButtonPosition: Literal["start", "end"]
    pageIconColor: Color


LegendComponentOption = Union[PlainLegendOption, ScrollableLegendOption]


class DataZoomBase(TypedDict, total=False):
    id: str
    disabled: bool
    xAxisIndex: Union[int, List[int]]
    yAxisIndex: Union[int, List[int]]
    filterMode: Literal["filter", "weakFilter", "empty", "none"]
    start: Annotated[Union[int, float], "Start of the window, in percent"]
    end: Annotated[Union[int, float], "End of the window, in percent"]
    startValue: Union[int, float, str]
    endValue: Union[int, float, str]
    orient: Literal["horizontal", "vertical"]
    zoomLock: bool


class InsideDataZoomOption(DataZoomBase, total=False):
    type: Literal["inside"]
    zoomOnMouseWheel: Union[bool, Literal["shift", "ctrl", "alt"]]
    moveOnMouseMove: Union[bool, Literal["shift", "ctrl", "alt"]]


class SliderDataZoomOption(DataZoomBase, BoxLayoutOption, total=False):
    type: Literal["slider"]
    show: bool
    backgroundColor: Color
    fillerColor: Color
    showDetail: bool
    realtime: bool
    textStyle: TextStyleOption


DataZoomComponentOption = Union[InsideDataZoomOption, SliderDataZoomOption]


class VisualMapBase(BoxLayoutOption, total=False):
    id: str
    show: bool
    dimension: Union[int, str]
    seriesIndex: Union[int, List[int]]
    inRange: Dict[str, Any]
    outOfRange: Dict[str, Any]
    orient: Literal["horizontal", "vertical"]
    textStyle: TextStyleOption


class ContinuousVisualMapOption(VisualMapBase, total=False):
    type: Literal["continuous"]
    min: Union[int, float]
    max: Union[int, float]
    range: List[Union[int, float]]
    calculable: bool
    realtime: bool


class PiecewiseVisualMapOption(VisualMapBase, total=False):
    type: Literal["piecewise"]
    splitNumber: int
    pieces: List[Dict[str, Any]]
    categories: List[str]
    selectedMode: Union[bool, Literal["single", "multiple"]]


VisualMapComponentOption = Union[ContinuousVisualMapOption, PiecewiseVisualMapOption]


class ToolboxComponentOption(BoxLayoutOption, total=False):
    show: bool
    orient: Literal["horizontal", "vertical"]
    itemSize: Union[int, float]
    itemGap: Union[int, float]
    showTitle: bool
    feature: Annotated[Dict[str, Dict[str, Any]], "Tools by name: saveAsImage, dataZoom, restore, ..."]
    iconStyle: ItemStyleOption


class DatasetComponentOption(TypedDict, total=False):
    id: str
    source: Annotated[Union[List[List[Any]], List[Dict[str, Any]], Dict[str, List[Any]]],
                      "Rows, objects or columns of raw data"]
    dimensions: List[Union[str, Dict[str, Any]]]
    sourceHeader: Union[bool, int, Literal["auto"]]
    fromDatasetIndex: int
    transform: Union[Dict[str, Any], List[Dict[str, Any]]]


class RadarIndicatorOption(TypedDict, total=False):
    name: str
    min: Union[int, float]
    max: Union[int, float]
    color: Color


class RadarComponentOption(TypedDict, total=False):
    id: str
    center: NumberPair
    radius: Union[Position, NumberPair]
    startAngle: Union[int, float]
    shape: Literal["polygon", "circle"]
    splitNumber: int
    indicator: Annotated[List[RadarIndicatorOption], "One entry per radar axis"]
    axisName: LabelOption
    splitArea: Dict[str, Any]
    splitLine: Dict[str, Any]


class PolarComponentOption(TypedDict, total=False):
    id: str
    center: NumberPair
    radius: Union[Position, NumberPair]


class GeoComponentOption(BoxLayoutOption, total=False):
    id: str
    show: bool
    map: Annotated[str, "Name of a map registered with echarts.registerMap"]
    roam: Union[bool, Literal["scale", "move"]]
    center: NumberPair
    zoom: Union[int, float]
    aspectScale: Union[int, float]
    label: LabelOption
    itemStyle: ItemStyleOption
    emphasis: EmphasisOption
    regions: List[Dict[str, Any]]


SeriesOption = Union[
    BarSeriesOption, LineSeriesOption, PieSeriesOption, ScatterSeriesOption,
    RadarSeriesOption, FunnelSeriesOption, GaugeSeriesOption, TreemapSeriesOption,
    BoxplotSeriesOption, HeatmapSeriesOption, CandlestickSeriesOption, SankeySeriesOption,
]


class EChartsOption(TypedDict, total=False):
    title: Union[TitleComponentOption, List[TitleComponentOption]]
    tooltip: Union[TooltipComponentOption, List[TooltipComponentOption]]
    grid: Union[GridComponentOption, List[GridComponentOption]]
    xAxis: Union[XAxisComponentOption, List[XAxisComponentOption]]
    yAxis: Union[YAxisComponentOption, List[YAxisComponentOption]]
    legend: Union[LegendComponentOption, List[LegendComponentOption]]
    dataZoom: Union[DataZoomComponentOption, List[DataZoomComponentOption]]
    visualMap: Union[VisualMapComponentOption, List[VisualMapComponentOption]]
    toolbox: ToolboxComponentOption
    dataset: Union[DatasetComponentOption, List[DatasetComponentOption]]
    radar: Union[RadarComponentOption, List[RadarComponentOption]]
    polar: Union[PolarComponentOption, List[PolarComponentOption]]
    geo: Union[GeoComponentOption, List[GeoComponentOption]]
    series: Annotated[Union[SeriesOption, List[SeriesOption]], "One series or a list of series"]
    color: Annotated[List[Color], "Palette used by series in order"]
    backgroundColor: Color
    textStyle: TextStyleOption
    animation: bool
    darkMode: bool


# Series roots
BarSchema = BarSeriesOption
LineSchema = LineSeriesOption
PieSchema = PieSeriesOption
ScatterSchema = ScatterSeriesOption
RadarSchema = RadarSeriesOption
FunnelSchema = FunnelSeriesOption
GaugeSchema = GaugeSeriesOption
TreemapSchema = TreemapSeriesOption
BoxplotSchema = BoxplotSeriesOption
HeatmapSchema = HeatmapSeriesOption
CandlestickSchema = CandlestickSeriesOption
SankeySchema = SankeySeriesOption

# Component roots
TitleSchema = TitleComponentOption
TooltipSchema = TooltipComponentOption
GridSchema = GridComponentOption
XAxisSchema = XAxisComponentOption
YAxisSchema = YAxisComponentOption
LegendSchema = LegendComponentOption
DataZoomSchema = DataZoomComponentOption
VisualMapSchema = VisualMapComponentOption
ToolboxSchema = ToolboxComponentOption
DatasetSchema = DatasetComponentOption
RadarCoordSchema = RadarComponentOption
PolarSchema = PolarComponentOption
GeoSchema = GeoComponentOption

FullOptionSchema = EChartsOption
