"""Sample document used by the command-line ``--example`` switch."""

EXAMPLE_XML = """<?xml version="1.0" encoding="UTF-8"?>
<response>
  <status code="200">SUCCESS</status>
  <transaction id="TXN-20240521-0001" channel="ALIPAY">
    <field key="merchant_id" value="M100293"/>
    <field key="order_no" value="ORD-88817263"/>
    <field key="amount" value="128.50"/>
    <field key="currency" value="CNY"/>
    <field key="paid_at" value="2024-05-21T14:32:08+08:00"/>
  </transaction>
  <buyer>
    <name>张三</name>
    <phone>138****0000</phone>
    <address province="浙江" city="杭州">西湖区文三路 100 号</address>
  </buyer>
  <items>
    <item sku="SKU-001" qty="2">Coffee beans</item>
    <item sku="SKU-002" qty="1">Pour-over kettle</item>
  </items>
  <signature type="RSA2"/>
</response>
"""
