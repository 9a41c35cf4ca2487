"""Wallet server (dcrwallet) method table.

Some names (getbestblock, getinfo, help, validateaddress, ...) are served by
both daemons; resolution always prefers the chain table, so the wallet entries
only matter for listing.
"""

from __future__ import annotations

from dcrctl.methods.registry import MethodRegistry, opt, req
from dcrctl.methods.types import ParamKind as K
from dcrctl.methods.types import UsageFlag

W = UsageFlag.WALLET_ONLY
W_NTFN = UsageFlag.WALLET_ONLY | UsageFlag.WEBSOCKET_ONLY | UsageFlag.NOTIFICATION

_KEYS = '["key",...]'
_OUTPOINTS = '[{"amount":n.nnn,"txid":"value","vout":n,"tree":n},...]'

WALLET_REGISTRY = MethodRegistry("wallet")
register = WALLET_REGISTRY.register

register("abandontransaction", req("hash", K.STRING), flags=W)
register("accountaddressindex", req("account", K.STRING), req("branch", K.INT64), flags=W)
register("accountsyncaddressindex", req("account", K.STRING), req("branch", K.INT64), req("index", K.INT64), flags=W)
register("addmultisigaddress", req("nrequired", K.INT64), req("keys", K.ARRAY, usage=_KEYS), opt("account", K.STRING), flags=W)
register("addtransaction", req("blockhash", K.STRING), req("transaction", K.STRING), flags=W)
register("auditreuse", opt("since", K.INT32), flags=W)
register("consolidate", req("inputs", K.INT64), opt("account", K.STRING), opt("address", K.STRING), flags=W)
register("createmultisig", req("nrequired", K.INT64), req("keys", K.ARRAY, usage=_KEYS), flags=W)
register("createnewaccount", req("account", K.STRING), flags=W)
register(
    "createsignature",
    req("address", K.STRING),
    req("inputindex", K.INT64),
    req("hashtype", K.INT64),
    req("previouspkscript", K.STRING),
    req("serializedtransaction", K.STRING),
    flags=W,
)
register("discoverusage", opt("startblock", K.STRING), opt("discoveraccounts", K.BOOL), opt("gaplimit", K.UINT32), flags=W)
register("dumpprivkey", req("address", K.STRING), flags=W)
register(
    "fundrawtransaction",
    req("hexstring", K.STRING),
    req("fundaccount", K.STRING),
    opt("options", K.OBJECT, usage='{"changeaddress":changeaddress,"feerate":feerate,"conftarget":conftarget}'),
    flags=W,
)
register("getaccount", req("address", K.STRING), flags=W)
register("getaccountaddress", req("account", K.STRING), flags=W)
register("getaddressesbyaccount", req("account", K.STRING), flags=W)
register("getbalance", opt("account", K.STRING), opt("minconf", K.INT64, 1), flags=W)
register("getbestblock", flags=W)
register("getbestblockhash", flags=W)
register("getblockcount", flags=W)
register("getinfo", flags=W)
register("getmasterpubkey", opt("account", K.STRING), flags=W)
register("getmultisigoutinfo", req("hash", K.STRING), req("index", K.UINT32), flags=W)
register("getnewaddress", opt("account", K.STRING), opt("gappolicy", K.STRING), flags=W)
register("getpeerinfo", flags=W)
register("getrawchangeaddress", opt("account", K.STRING), flags=W)
register("getreceivedbyaccount", req("account", K.STRING), opt("minconf", K.INT64, 1), flags=W)
register("getreceivedbyaddress", req("address", K.STRING), opt("minconf", K.INT64, 1), flags=W)
register("getstakeinfo", flags=W)
register("gettickets", req("includeimmature", K.BOOL), flags=W)
register("gettransaction", req("txid", K.STRING), opt("includewatchonly", K.BOOL, False), flags=W)
register("getunconfirmedbalance", opt("account", K.STRING), flags=W)
register("getvotechoices", opt("tickethash", K.STRING), flags=W)
register("getwalletfee", flags=W)
register("help", opt("command", K.STRING), flags=W)
register(
    "importprivkey",
    req("privkey", K.STRING),
    opt("label", K.STRING),
    opt("rescan", K.BOOL, True),
    opt("scanfrom", K.INT64),
    flags=W,
)
register("importscript", req("hex", K.STRING), opt("rescan", K.BOOL, True), opt("scanfrom", K.INT64), flags=W)
register("importxpub", req("name", K.STRING), req("xpub", K.STRING), flags=W)
register("listaccounts", opt("minconf", K.INT64, 1), flags=W)
register("listaddresstransactions", req("addresses", K.ARRAY, usage='["address",...]'), opt("account", K.STRING), flags=W)
register("listalltransactions", opt("account", K.STRING), flags=W)
register("listlockunspent", opt("account", K.STRING), flags=W)
register(
    "listreceivedbyaccount",
    opt("minconf", K.INT64, 1),
    opt("includeempty", K.BOOL, False),
    opt("includewatchonly", K.BOOL, False),
    flags=W,
)
register(
    "listreceivedbyaddress",
    opt("minconf", K.INT64, 1),
    opt("includeempty", K.BOOL, False),
    opt("includewatchonly", K.BOOL, False),
    flags=W,
)
register(
    "listsinceblock",
    opt("blockhash", K.STRING),
    opt("targetconfirmations", K.INT64, 1),
    opt("includewatchonly", K.BOOL, False),
    flags=W,
)
register(
    "listtransactions",
    opt("account", K.STRING),
    opt("count", K.INT64, 10),
    opt("from", K.INT64, 0),
    opt("includewatchonly", K.BOOL, False),
    flags=W,
)
register(
    "listunspent",
    opt("minconf", K.INT64, 1),
    opt("maxconf", K.INT64, 9999999),
    opt("addresses", K.ARRAY, usage='["address",...]'),
    opt("account", K.STRING),
    flags=W,
)
register("lockunspent", req("unlock", K.BOOL), req("transactions", K.ARRAY, usage=_OUTPOINTS), flags=W)
register("mixaccount", flags=W)
register("mixoutput", req("outpoint", K.STRING), flags=W)
register(
    "purchaseticket",
    req("fromaccount", K.STRING),
    req("spendlimit", K.FLOAT64),
    opt("minconf", K.INT64, 1),
    opt("ticketaddress", K.STRING),
    opt("numtickets", K.INT64),
    opt("pooladdress", K.STRING),
    opt("poolfees", K.FLOAT64),
    opt("expiry", K.INT64),
    opt("comment", K.STRING),
    opt("dontsigntx", K.BOOL),
    flags=W,
)
register("renameaccount", req("oldaccount", K.STRING), req("newaccount", K.STRING), flags=W)
register("rescanwallet", opt("beginheight", K.INT64, 0), flags=W)
register("revoketickets", flags=W)
register(
    "sendfrom",
    req("fromaccount", K.STRING),
    req("toaddress", K.STRING),
    req("amount", K.FLOAT64),
    opt("minconf", K.INT64, 1),
    opt("comment", K.STRING),
    opt("commentto", K.STRING),
    flags=W,
)
register(
    "sendmany",
    req("fromaccount", K.STRING),
    req("amounts", K.OBJECT, usage='{"address":amount,...}'),
    opt("minconf", K.INT64, 1),
    opt("comment", K.STRING),
    flags=W,
)
register(
    "sendtoaddress",
    req("address", K.STRING),
    req("amount", K.FLOAT64),
    opt("comment", K.STRING),
    opt("commentto", K.STRING),
    flags=W,
)
register("setticketfee", req("fee", K.FLOAT64), flags=W)
register("settxfee", req("amount", K.FLOAT64), flags=W)
register("setvotechoice", req("agendaid", K.STRING), req("choiceid", K.STRING), opt("tickethash", K.STRING), flags=W)
register("signmessage", req("address", K.STRING), req("message", K.STRING), flags=W)
register(
    "signrawtransaction",
    req("rawtx", K.STRING),
    opt(
        "inputs",
        K.ARRAY,
        usage='[{"txid":"value","vout":n,"tree":n,"scriptpubkey":"value","redeemscript":"value"},...]',
    ),
    opt("privkeys", K.ARRAY, usage='["privkey",...]'),
    opt("flags", K.STRING, "ALL"),
    flags=W,
)
register("stakepooluserinfo", req("user", K.STRING), flags=W)
register(
    "sweepaccount",
    req("sourceaccount", K.STRING),
    req("destinationaddress", K.STRING),
    opt("requiredconfirmations", K.UINT32),
    opt("feeperkb", K.FLOAT64),
    flags=W,
)
register("ticketinfo", opt("startheight", K.INT32, 0), flags=W)
register("validateaddress", req("address", K.STRING), flags=W)
register("validatepredcp0005cf", flags=W)
register("verifymessage", req("address", K.STRING), req("signature", K.STRING), req("message", K.STRING), flags=W)
register("version", flags=W)
register("walletinfo", flags=W)
register("walletislocked", flags=W)
register("walletlock", flags=W)
register("walletpassphrase", req("passphrase", K.STRING), req("timeout", K.INT64), flags=W)
register("walletpassphrasechange", req("oldpassphrase", K.STRING), req("newpassphrase", K.STRING), flags=W)
register("walletpubpassphrasechange", req("oldpassphrase", K.STRING), req("newpassphrase", K.STRING), flags=W)

register("accountbalance", req("account", K.STRING), req("balance", K.FLOAT64), req("confirmed", K.BOOL), flags=W_NTFN)
register("revocationcreated", req("txhash", K.STRING), req("sstxin", K.STRING), flags=W_NTFN)
register("ticketpurchased", req("txhash", K.STRING), req("amount", K.INT64), flags=W_NTFN)
register("votecreated", req("txhash", K.STRING), req("blockhash", K.STRING), req("height", K.INT32), req("sstxin", K.STRING), req("votebits", K.UINT16), flags=W_NTFN)
register("walletlockstate", req("locked", K.BOOL), flags=W_NTFN)

del register
