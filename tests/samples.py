"""NinjaScript sources shared by the tests."""

INDICATOR_TEMPLATE = """#region Using declarations
using System;
using System.Collections.Generic;
using System.ComponentModel;
using System.ComponentModel.DataAnnotations;
using System.Windows.Media;
using System.Xml.Serialization;
using NinjaTrader.Gui;
using NinjaTrader.NinjaScript;
using NinjaTrader.NinjaScript.DrawingTools;
#endregion

namespace NinjaTrader.NinjaScript.Indicators
{
    public class CleanSignal : Indicator
    {
        private SMA fastSma;
__FIELDS__
        protected override void OnStateChange()
        {
            if (State == State.SetDefaults)
            {
                Name = "CleanSignal";
                Description = @"Arrow when price closes above its moving average.";
                Calculate = Calculate.__CALCULATE__;
                IsOverlay = true;
                Period = 14;
                ArrowBrush = Brushes.Lime;
            }
            else if (State == State.Configure)
            {
__CONFIGURE__
            }
            else if (State == State.DataLoaded)
            {
                fastSma = SMA(Close, Period);
__DATA_LOADED__
            }
        }

        protected override void OnBarUpdate()
        {
__ON_BAR_UPDATE__
            Draw.TextFixed(this, "infoPanel", "SMA: " + fastSma[0].ToString("F2"), TextPosition.TopRight);
        }

        #region Properties
        [NinjaScriptProperty]
        [Range(1, int.MaxValue)]
        [Display(Name = "Period", Order = 1, GroupName = "Parameters")]
        public int Period { get; set; }

        [XmlIgnore]
        [Display(Name = "Arrow color", Order = 2, GroupName = "Colors")]
        public Brush ArrowBrush { get; set; }

        [Browsable(false)]
        public string ArrowBrushSerializable
        {
            get { return Serialize.BrushToString(ArrowBrush); }
            set { ArrowBrush = Serialize.StringToBrush(value); }
        }
__PROPERTIES__
        #endregion
    }
}
"""

DEFAULT_ON_BAR_UPDATE = """            if (CurrentBar < Period)
                return;

            if (Close[0] > fastSma[0] && Close[1] <= fastSma[1])
                Draw.ArrowUp(this, "up" + CurrentBar, true, 0, Low[0] - TickSize, ArrowBrush);
"""


def make_indicator(
    calculate="OnBarClose",
    on_bar_update=DEFAULT_ON_BAR_UPDATE,
    configure="",
    data_loaded="",
    fields="",
    properties="",
):
    """A well-formed indicator with the given pieces substituted in."""
    return (
        INDICATOR_TEMPLATE
        .replace("__CALCULATE__", calculate)
        .replace("__ON_BAR_UPDATE__", on_bar_update.rstrip("\n"))
        .replace("__CONFIGURE__", configure.rstrip("\n"))
        .replace("__DATA_LOADED__", data_loaded.rstrip("\n"))
        .replace("__FIELDS__", fields.rstrip("\n"))
        .replace("__PROPERTIES__", properties.rstrip("\n"))
    )


CLEAN_INDICATOR = make_indicator()

BARE_BRUSH_INDICATOR = """using System;
using System.Windows.Media;

namespace NinjaTrader.NinjaScript.Indicators
{
    public class BareBrush : Indicator
    {
        protected override void OnStateChange()
        {
            if (State == State.SetDefaults)
            {
                Name = "BareBrush";
                Description = "Colored bars";
                Calculate = Calculate.OnBarClose;
                IsOverlay = true;
                UpColor = Brushes.Green;
            }
            else if (State == State.Configure)
            {
            }
        }

        protected override void OnBarUpdate()
        {
            BarBrush = UpColor;
        }

        [Display(Name = "Up color", Order = 1, GroupName = "Colors")]
        public Brush UpColor { get; set; }
    }
}
"""

STRATEGY = """using System;

namespace NinjaTrader.NinjaScript.Strategies
{
    public class Breakout : Strategy
    {
        protected override void OnStateChange()
        {
            if (State == State.SetDefaults)
            {
                Name = "Breakout";
                Description = "Breakout entries";
                Calculate = Calculate.OnBarClose;
            }
            else if (State == State.Configure)
            {
                SetStopLoss("LongEntry", CalculationMode.Ticks, 10, false);
                SetProfitTarget("LongEntyr", CalculationMode.Ticks, 20);
            }
        }

        protected override void OnBarUpdate()
        {
            if (CurrentBar < 20)
                return;
            if (Close[0] > MAX(High, 20)[1])
                EnterLong(1, "LongEntry");
        }
    }
}
"""

MTF_ON_BAR_UPDATE_UNGUARDED = """            if (Close[0] > fastSma[0])
                Draw.ArrowUp(this, "up" + CurrentBar, true, 0, Low[0], ArrowBrush);
"""

MTF_ON_BAR_UPDATE_GUARDED = """            if (BarsInProgress != 0)
                return;
            if (CurrentBars[0] < 20 || CurrentBars[1] < 20 || CurrentBars[2] < 20)
                return;
            if (Close[0] > fastSma[0] && Closes[2][0] > Closes[1][0])
                Draw.ArrowUp(this, "up" + CurrentBar, true, 0, Low[0], ArrowBrush);
"""

TWO_SERIES_CONFIGURE = """                AddDataSeries(Data.BarsPeriodType.Minute, 5);
                AddDataSeries(Data.BarsPeriodType.Minute, 15);
"""

PER_TICK_ARROW = """            if (Close[0] > fastSma[0])
                Draw.ArrowUp(this, "up" + CurrentBar, true, 0, Low[0], ArrowBrush);
"""

PER_TICK_ARROW_GUARDED = """            if (Close[0] > fastSma[0] && CurrentBar != lastSignalBar)
            {
                Draw.ArrowUp(this, "up" + CurrentBar, true, 0, Low[0], ArrowBrush);
                lastSignalBar = CurrentBar;
            }
"""
