"""Chain server (dcrd) method table."""

from __future__ import annotations

from dcrctl.methods.registry import MethodRegistry, opt, req
from dcrctl.methods.types import ParamKind as K
from dcrctl.methods.types import UsageFlag

WS = UsageFlag.WEBSOCKET_ONLY
NTFN = UsageFlag.WEBSOCKET_ONLY | UsageFlag.NOTIFICATION

_TX_INPUTS = '[{"amount":n.nnn,"txid":"value","vout":n,"tree":n},...]'
_ADDRESSES = '["address",...]'
_OUTPOINTS = '[{"hash":"value","tree":n,"index":n},...]'

CHAIN_REGISTRY = MethodRegistry("chain")
register = CHAIN_REGISTRY.register

register("addnode", req("addr", K.STRING), req("subcmd", K.STRING, usage='"add|remove|onetry"'))
register(
    "createrawssrtx",
    req("inputs", K.ARRAY, usage=_TX_INPUTS),
    opt("fee", K.FLOAT64),
)
register(
    "createrawsstx",
    req("inputs", K.ARRAY, usage='[{"txid":"value","vout":n,"tree":n,"amt":n},...]'),
    req("amount", K.OBJECT, usage='{"address":amount,...}'),
    req("couts", K.ARRAY, usage='[{"addr":"value","commitamt":n,"changeaddr":"value","changeamt":n},...]'),
)
register(
    "createrawtransaction",
    req("inputs", K.ARRAY, usage=_TX_INPUTS),
    req("amounts", K.OBJECT, usage='{"address":amount,...}'),
    opt("locktime", K.INT64),
    opt("expiry", K.INT64),
)
register("debuglevel", req("levelspec", K.STRING))
register("decoderawtransaction", req("hextx", K.STRING))
register("decodescript", req("hexscript", K.STRING), opt("version", K.UINT16))
register("estimatefee", req("numblocks", K.INT64))
register("estimatesmartfee", req("confirmations", K.INT64), opt("mode", K.STRING, "conservative"))
register("estimatestakediff", opt("tickets", K.UINT32))
register("existsaddress", req("address", K.STRING))
register("existsaddresses", req("addresses", K.ARRAY, usage=_ADDRESSES))
register("existsexpiredtickets", req("txhashes", K.ARRAY, usage='["txhash",...]'))
register("existsliveticket", req("txhash", K.STRING))
register("existslivetickets", req("txhashes", K.ARRAY, usage='["txhash",...]'))
register("existsmempooltxs", req("txhashes", K.ARRAY, usage='["txhash",...]'))
register("existsmissedtickets", req("txhashes", K.ARRAY, usage='["txhash",...]'))
register("generate", req("numblocks", K.UINT32))
register("getaddednodeinfo", req("dns", K.BOOL), opt("node", K.STRING))
register("getbestblock")
register("getbestblockhash")
register("getblock", req("hash", K.STRING), opt("verbose", K.BOOL, True), opt("verbosetx", K.BOOL, False))
register("getblockchaininfo")
register("getblockcount")
register("getblockhash", req("index", K.INT64))
register("getblockheader", req("hash", K.STRING), opt("verbose", K.BOOL, True))
register("getblocksubsidy", req("height", K.INT64), req("voters", K.UINT16))
register("getcfilterv2", req("blockhash", K.STRING))
register("getchaintips")
register("getcoinsupply")
register("getconnectioncount")
register("getcurrentnet")
register("getdifficulty")
register("getgenerate")
register("gethashespersec")
register("getheaders", req("blocklocators", K.ARRAY, usage='["blocklocator",...]'), req("hashstop", K.STRING))
register("getinfo")
register("getmempoolinfo")
register("getmininginfo")
register("getnettotals")
register("getnetworkhashps", opt("blocks", K.INT64, 120), opt("height", K.INT64, -1))
register("getnetworkinfo")
register("getpeerinfo")
register("getrawmempool", opt("verbose", K.BOOL, False), opt("txtype", K.STRING))
register("getrawtransaction", req("txid", K.STRING), opt("verbose", K.INT64, 0))
register("getstakedifficulty")
register("getstakeversioninfo", opt("count", K.INT32))
register("getstakeversions", req("hash", K.STRING), req("count", K.INT32))
register("getticketpoolvalue")
register("gettreasurybalance", opt("hash", K.STRING), opt("verbose", K.BOOL, False))
register("gettreasuryspendvotes", opt("block", K.STRING), opt("tspends", K.ARRAY, usage='["tspend",...]'))
register(
    "gettxout",
    req("txid", K.STRING),
    req("vout", K.UINT32),
    req("tree", K.INT8),
    opt("includemempool", K.BOOL, True),
)
register("gettxoutsetinfo")
register("getvoteinfo", req("version", K.UINT32))
register("getwork", opt("data", K.STRING))
register("help", opt("command", K.STRING))
register("livetickets")
register("missedtickets")
register("node", req("subcmd", K.STRING, usage='"disconnect|remove|connect"'), req("target", K.STRING), opt("connectsubcmd", K.STRING))
register("ping")
register("regentemplate")
register(
    "searchrawtransactions",
    req("address", K.STRING),
    opt("verbose", K.INT64, 1),
    opt("skip", K.INT64, 0),
    opt("count", K.INT64, 100),
    opt("vinextra", K.INT64, 0),
    opt("reverse", K.BOOL, False),
    opt("filteraddrs", K.ARRAY, usage='["filteraddr",...]'),
)
register("sendrawtransaction", req("hextx", K.STRING), opt("allowhighfees", K.BOOL, False))
register("setgenerate", req("generate", K.BOOL), opt("genproclimit", K.INT64, -1))
register("stop")
register("submitblock", req("hexblock", K.STRING), opt("options", K.OBJECT, usage='{"workid":"value"}'))
register("ticketfeeinfo", opt("blocks", K.UINT32), opt("windows", K.UINT32))
register("ticketsforaddress", req("address", K.STRING))
register("ticketvwap", opt("start", K.UINT32), opt("end", K.UINT32))
register("txfeeinfo", opt("blocks", K.UINT32), opt("rangestart", K.UINT32), opt("rangeend", K.UINT32))
register("validateaddress", req("address", K.STRING))
register("verifychain", opt("checklevel", K.INT64, 3), opt("checkdepth", K.INT64, 288))
register("verifymessage", req("address", K.STRING), req("signature", K.STRING), req("message", K.STRING))
register("version")

# Websocket-only requests and server-initiated notifications.
register("authenticate", req("username", K.STRING), req("passphrase", K.STRING), flags=WS)
register(
    "loadtxfilter",
    req("reload", K.BOOL),
    req("addresses", K.ARRAY, usage=_ADDRESSES),
    req("outpoints", K.ARRAY, usage=_OUTPOINTS),
    flags=WS,
)
register("notifyblocks", flags=WS)
register("notifynewtickets", flags=WS)
register("notifynewtransactions", opt("verbose", K.BOOL, False), flags=WS)
register("notifytspend", flags=WS)
register("notifywinningtickets", flags=WS)
register("notifywork", flags=WS)
register("rebroadcastwinners", flags=WS)
register("rescan", req("blockhashes", K.ARRAY, usage='["blockhash",...]'), flags=WS)
register("session", flags=WS)
register("stopnotifyblocks", flags=WS)
register("stopnotifynewtransactions", flags=WS)

register("blockconnected", req("header", K.STRING), req("subscribedtxs", K.ARRAY), flags=NTFN)
register("blockdisconnected", req("header", K.STRING), flags=NTFN)
register("newtickets", req("hash", K.STRING), req("height", K.INT32), req("stakediff", K.INT64), req("tickets", K.ARRAY), flags=NTFN)
register("relevanttxaccepted", req("transaction", K.STRING), flags=NTFN)
register("txaccepted", req("txid", K.STRING), req("amount", K.FLOAT64), flags=NTFN)
register("txacceptedverbose", req("rawtx", K.OBJECT), flags=NTFN)
register("tspend", req("tspend", K.STRING), flags=NTFN)
register("winningtickets", req("blockhash", K.STRING), req("blockheight", K.INT64), req("tickets", K.OBJECT), flags=NTFN)
register("work", req("data", K.STRING), req("target", K.STRING), req("reason", K.STRING), flags=NTFN)

del register
